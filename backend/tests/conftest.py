from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock

import pytest
from starlette.testclient import TestClient

from app.core.dependencies import get_cache_store, get_directory_client, get_employee_service
from app.main import app
from app.models.employee import Employee, RemoteEmployeeRecord
from app.services.cache_store import InMemoryEmployeeCache
from app.services.employee_service import EmployeeService

# (id, name, salary, age)
SAMPLE_EMPLOYEES: list[tuple[int, str, int, int]] = [
    (1, "Dhiraj", 4500, 23),
    (2, "Suraj", 5500, 26),
    (3, "Rajesh", 4100, 22),
    (4, "Ramesh", 4500, 23),
    (5, "Rajendra", 4101, 32),
    (6, "Pavan", 6600, 31),
    (7, "Shivam", 7700, 30),
    (8, "Shivraj", 2700, 50),
    (9, "Viraj", 6000, 19),
    (10, "Siraj", 6235, 20),
    (11, "Virat", 4511, 24),
    (12, "Rohit", 8400, 23),
    (13, "Rishabh", 900, 25),
]


def make_remote_payload(rows=SAMPLE_EMPLOYEES) -> list[dict]:
    return [
        {
            "id": emp_id,
            "employee_name": name,
            "employee_salary": salary,
            "employee_age": age,
            "profile_image": "",
        }
        for emp_id, name, salary, age in rows
    ]


@pytest.fixture(autouse=True)
def _app_settings():
    from app.core.config import settings

    original_warm = settings.CACHE_WARM_ON_STARTUP
    settings.CACHE_WARM_ON_STARTUP = False
    yield
    settings.CACHE_WARM_ON_STARTUP = original_warm


@pytest.fixture
def remote_records() -> list[RemoteEmployeeRecord]:
    return [RemoteEmployeeRecord.model_validate(item) for item in make_remote_payload()]


@pytest.fixture
def employees(remote_records) -> list[Employee]:
    return [record.to_employee() for record in remote_records]


@pytest.fixture
def cache() -> InMemoryEmployeeCache:
    return InMemoryEmployeeCache()


@pytest.fixture
def directory_client() -> MagicMock:
    """DirectoryClient double whose operations are AsyncMocks returning RemoteResults."""
    client = MagicMock()
    client.list_all = AsyncMock()
    client.get_by_id = AsyncMock()
    client.create = AsyncMock()
    client.delete_by_id = AsyncMock()
    client.check_connection = AsyncMock(return_value=True)
    return client


@pytest.fixture
def client():
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def mock_service() -> MagicMock:
    service = MagicMock(spec=EmployeeService)
    service.get_all_employees = AsyncMock()
    service.search_employees_by_name = AsyncMock()
    service.get_employee_by_id = AsyncMock()
    service.get_highest_salary = AsyncMock()
    service.get_top_earning_names = AsyncMock()
    service.create_employee = AsyncMock()
    service.delete_employee_by_id = AsyncMock()
    return service


@pytest.fixture
def service_client(mock_service, directory_client, cache):
    app.dependency_overrides[get_employee_service] = lambda: mock_service
    app.dependency_overrides[get_directory_client] = lambda: directory_client
    app.dependency_overrides[get_cache_store] = lambda: cache
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()
