from __future__ import annotations

from fastapi import HTTPException, Request, status

from app.services.cache_store import EmployeeCacheStore
from app.services.directory_client import DirectoryClient
from app.services.employee_service import EmployeeService


def _from_state(request: Request, name: str):
    value = getattr(request.app.state, name, None)
    if value is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Service not initialized",
        )
    return value


def get_employee_service(request: Request) -> EmployeeService:
    return _from_state(request, "employee_service")


def get_directory_client(request: Request) -> DirectoryClient:
    return _from_state(request, "directory_client")


def get_cache_store(request: Request) -> EmployeeCacheStore:
    return _from_state(request, "cache_store")
