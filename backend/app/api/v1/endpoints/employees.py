from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, Body, Depends, HTTPException, status

from app.core.dependencies import get_employee_service
from app.core.errors import (
    DataNotFound,
    DirectoryError,
    InvalidInput,
    UpstreamClientError,
    UpstreamError,
    UpstreamUnavailable,
)
from app.models.employee import Employee
from app.services.employee_service import EmployeeService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/employees", tags=["employees"])


def _to_http_exception(err: DirectoryError) -> HTTPException:
    if isinstance(err, DataNotFound):
        return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=err.message)
    if isinstance(err, InvalidInput):
        return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=err.message)
    if isinstance(err, UpstreamClientError) and err.status_code:
        return HTTPException(status_code=err.status_code, detail=f"Directory API error: {err.detail}")
    if isinstance(err, UpstreamUnavailable):
        return HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Directory API unavailable",
        )
    if isinstance(err, UpstreamError):
        return HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=f"Directory API error: {err.detail}")
    return HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(err))


def _internal_error(detail: str) -> HTTPException:
    return HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=detail)


@router.get("", response_model=list[Employee])
async def get_all_employees(
    service: EmployeeService = Depends(get_employee_service),  # noqa: B008
):
    try:
        return await service.get_all_employees()
    except DirectoryError as err:
        raise _to_http_exception(err) from err
    except Exception as err:
        logger.exception("Failed to list employees")
        raise _internal_error("Failed to retrieve employees") from err


@router.get("/search/{search_string}", response_model=list[Employee])
async def get_employees_by_name_search(
    search_string: str,
    service: EmployeeService = Depends(get_employee_service),  # noqa: B008
):
    try:
        return await service.search_employees_by_name(search_string)
    except DirectoryError as err:
        raise _to_http_exception(err) from err
    except Exception as err:
        logger.exception("Failed to search employees by %r", search_string)
        raise _internal_error("Failed to search employees") from err


@router.get("/highest-salary", response_model=int)
async def get_highest_salary_of_employees(
    service: EmployeeService = Depends(get_employee_service),  # noqa: B008
):
    try:
        return await service.get_highest_salary()
    except DirectoryError as err:
        raise _to_http_exception(err) from err
    except Exception as err:
        logger.exception("Failed to compute highest salary")
        raise _internal_error("Failed to compute highest salary") from err


@router.get("/top-earners", response_model=list[str])
async def get_top_ten_highest_earning_employee_names(
    service: EmployeeService = Depends(get_employee_service),  # noqa: B008
):
    try:
        return await service.get_top_earning_names()
    except DirectoryError as err:
        raise _to_http_exception(err) from err
    except Exception as err:
        logger.exception("Failed to compute top earners")
        raise _internal_error("Failed to compute top earners") from err


@router.get("/{employee_id}", response_model=Employee)
async def get_employee_by_id(
    employee_id: str,
    service: EmployeeService = Depends(get_employee_service),  # noqa: B008
):
    try:
        return await service.get_employee_by_id(employee_id)
    except DirectoryError as err:
        raise _to_http_exception(err) from err
    except Exception as err:
        logger.exception("Failed to get employee %s", employee_id)
        raise _internal_error("Failed to retrieve employee") from err


@router.post("", response_model=Employee, status_code=status.HTTP_201_CREATED)
async def create_employee(
    employee_input: dict[str, Any] = Body(...),  # noqa: B008
    service: EmployeeService = Depends(get_employee_service),  # noqa: B008
):
    try:
        return await service.create_employee(employee_input)
    except DirectoryError as err:
        raise _to_http_exception(err) from err
    except Exception as err:
        logger.exception("Failed to create employee")
        raise _internal_error("Failed to create employee") from err


@router.delete("/{employee_id}", response_model=str)
async def delete_employee_by_id(
    employee_id: str,
    service: EmployeeService = Depends(get_employee_service),  # noqa: B008
):
    try:
        return await service.delete_employee_by_id(employee_id)
    except DirectoryError as err:
        raise _to_http_exception(err) from err
    except Exception as err:
        logger.exception("Failed to delete employee %s", employee_id)
        raise _internal_error("Failed to delete employee") from err
