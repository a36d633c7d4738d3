"""Durable employee cache used as a read-through mirror of the remote directory."""

from __future__ import annotations

import logging
from typing import Any, Protocol

from azure.cosmos import PartitionKey
from azure.cosmos.aio import CosmosClient
from azure.cosmos.exceptions import CosmosResourceNotFoundError

from app.core.config import Settings
from app.models.employee import Employee

logger = logging.getLogger(__name__)


class EmployeeCacheStore(Protocol):
    backend: str

    async def upsert_all(self, employees: list[Employee]) -> None: ...

    async def upsert(self, employee: Employee) -> None: ...

    async def find_all(self) -> list[Employee]: ...

    async def find_by_id(self, employee_id: int) -> Employee | None: ...

    async def delete(self, employee: Employee) -> None: ...

    async def check_connection(self) -> bool: ...

    async def close(self) -> None: ...


def _to_document(employee: Employee) -> dict[str, Any]:
    doc = employee.model_dump()
    # Cosmos DB item ids must be strings
    doc["id"] = str(employee.id)
    return doc


def _from_document(doc: dict[str, Any]) -> Employee:
    return Employee.model_validate(doc)


class InMemoryEmployeeCache:
    """Process-local cache for development and tests; not durable."""

    backend = "in_memory"

    def __init__(self) -> None:
        self._items: dict[int, Employee] = {}

    async def upsert_all(self, employees: list[Employee]) -> None:
        for employee in employees:
            self._items[employee.id] = employee

    async def upsert(self, employee: Employee) -> None:
        self._items[employee.id] = employee

    async def find_all(self) -> list[Employee]:
        return list(self._items.values())

    async def find_by_id(self, employee_id: int) -> Employee | None:
        return self._items.get(employee_id)

    async def delete(self, employee: Employee) -> None:
        self._items.pop(employee.id, None)

    async def check_connection(self) -> bool:
        return True

    async def close(self) -> None:
        self._items.clear()


class CosmosEmployeeCache:
    backend = "cosmos_db"

    def __init__(self) -> None:
        self.client: CosmosClient | None = None
        self.container: Any = None
        self.initialized: bool = False

    async def initialize(self, settings: Settings) -> None:
        if self.initialized:
            return

        endpoint = settings.COSMOS_DB_ENDPOINT
        key = settings.COSMOS_DB_KEY
        database_name = settings.COSMOS_DB_DATABASE
        container_name = settings.COSMOS_DB_EMPLOYEES_CONTAINER

        if not endpoint or not key:
            logger.warning("Cosmos DB credentials missing, employee cache not initialized")
            return

        self.client = CosmosClient(endpoint, key)
        try:
            db = await self.client.create_database_if_not_exists(id=database_name)
            self.container = await db.create_container_if_not_exists(
                id=container_name,
                partition_key=PartitionKey(path="/id"),
            )
        except Exception:
            await self.client.close()
            self.client = None
            self.container = None
            raise
        self.initialized = True
        logger.info("CosmosEmployeeCache initialized (container=%s)", container_name)

    async def close(self) -> None:
        if self.client:
            await self.client.close()
            self.client = None
            self.container = None
            self.initialized = False

    def _require_container(self) -> Any:
        if not self.container:
            raise RuntimeError("CosmosEmployeeCache not initialized")
        return self.container

    async def upsert_all(self, employees: list[Employee]) -> None:
        container = self._require_container()
        for employee in employees:
            await container.upsert_item(body=_to_document(employee))

    async def upsert(self, employee: Employee) -> None:
        container = self._require_container()
        await container.upsert_item(body=_to_document(employee))

    async def find_all(self) -> list[Employee]:
        container = self._require_container()
        employees: list[Employee] = []
        async for item in container.read_all_items():
            employees.append(_from_document(item))
        return employees

    async def find_by_id(self, employee_id: int) -> Employee | None:
        container = self._require_container()
        key = str(employee_id)
        try:
            item = await container.read_item(item=key, partition_key=key)
        except CosmosResourceNotFoundError:
            return None
        return _from_document(item)

    async def delete(self, employee: Employee) -> None:
        container = self._require_container()
        key = str(employee.id)
        try:
            await container.delete_item(item=key, partition_key=key)
        except CosmosResourceNotFoundError:
            logger.info("Employee %s already absent from Cosmos DB cache", employee.id)

    async def check_connection(self) -> bool:
        if not self.container:
            return False
        try:
            await self.container.read()
            return True
        except Exception:
            logger.exception("Cosmos DB connection check failed")
            return False


async def build_cache_store(settings: Settings) -> EmployeeCacheStore:
    if not settings.COSMOS_DB_ENDPOINT or not settings.COSMOS_DB_KEY:
        logger.warning("Cosmos DB not configured, using in-memory employee cache")
        return InMemoryEmployeeCache()

    cache = CosmosEmployeeCache()
    await cache.initialize(settings)
    return cache
