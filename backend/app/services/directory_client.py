"""Remote directory API client (dummy.restapiexample.com compatible).

Every call returns a ``RemoteResult`` instead of raising: either the decoded
payload or a ``RemoteFailure`` whose ``kind`` tells the caller whether the
failure is transient (eligible for a cache fallback) or not.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Generic, TypeVar

import aiohttp
from pydantic import BaseModel

from app.core.config import Settings
from app.core.errors import (
    UpstreamClientError,
    UpstreamPayloadError,
    UpstreamServerError,
    UpstreamUnavailable,
)
from app.models.employee import (
    Employee,
    EmployeeCreateResponse,
    EmployeeDeleteResponse,
    EmployeeListResponse,
    EmployeeResponse,
    RemoteEmployeeRecord,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")
U = TypeVar("U")
M = TypeVar("M", bound=BaseModel)

FETCH_ALL_EMPLOYEES = "api/v1/employees"
FETCH_EMPLOYEE_BY_ID = "api/v1/employee/{employee_id}"
CREATE_EMPLOYEE = "api/v1/create"
DELETE_EMPLOYEE_BY_ID = "api/v1/delete/{employee_id}"

_HEADERS = {"Accept": "application/json", "Content-Type": "application/json"}
_MAX_ERROR_DETAIL = 200


class FailureKind(str, Enum):
    CLIENT_ERROR = "client_error"
    SERVER_ERROR = "server_error"
    UNREACHABLE = "unreachable"
    OTHER = "other"

    @property
    def transient(self) -> bool:
        return self is not FailureKind.OTHER


@dataclass(frozen=True)
class RemoteFailure:
    kind: FailureKind
    error: Exception


@dataclass(frozen=True)
class RemoteResult(Generic[T]):
    value: T | None = None
    failure: RemoteFailure | None = None

    @property
    def ok(self) -> bool:
        return self.failure is None

    @classmethod
    def success(cls, value: T) -> RemoteResult[T]:
        return cls(value=value)

    @classmethod
    def failed(cls, kind: FailureKind, error: Exception) -> RemoteResult[T]:
        return cls(failure=RemoteFailure(kind=kind, error=error))

    def map(self, fn: Callable[[T], U]) -> RemoteResult[U]:
        if self.failure is not None:
            return RemoteResult(failure=self.failure)
        return RemoteResult(value=fn(self.value))  # type: ignore[arg-type]


def classify_status(status: int, detail: str) -> RemoteFailure:
    detail = detail.strip()[:_MAX_ERROR_DETAIL] or "no response body"
    if 400 <= status < 500:
        return RemoteFailure(FailureKind.CLIENT_ERROR, UpstreamClientError(detail, status))
    if status >= 500:
        return RemoteFailure(FailureKind.SERVER_ERROR, UpstreamServerError(detail, status))
    return RemoteFailure(FailureKind.OTHER, UpstreamPayloadError(f"Unexpected response: {detail}", status))


class DirectoryClient:
    def __init__(self, base_url: str, timeout: float = 10.0) -> None:
        self.base_url = base_url if base_url.endswith("/") else f"{base_url}/"
        self.timeout = timeout

    @classmethod
    def from_settings(cls, settings: Settings) -> DirectoryClient:
        return cls(settings.DIRECTORY_API_BASE_URL, settings.DIRECTORY_API_TIMEOUT_SECONDS)

    async def list_all(self) -> RemoteResult[list[RemoteEmployeeRecord] | None]:
        result = await self._request("GET", FETCH_ALL_EMPLOYEES, EmployeeListResponse)
        return result.map(lambda envelope: envelope.data)

    async def get_by_id(self, employee_id: int) -> RemoteResult[RemoteEmployeeRecord | None]:
        path = FETCH_EMPLOYEE_BY_ID.format(employee_id=employee_id)
        result = await self._request("GET", path, EmployeeResponse)
        return result.map(lambda envelope: envelope.data)

    async def create(self, fields: dict[str, Any]) -> RemoteResult[Employee | None]:
        result = await self._request("POST", CREATE_EMPLOYEE, EmployeeCreateResponse, payload=fields)
        return result.map(lambda envelope: envelope.data)

    async def delete_by_id(self, employee_id: int) -> RemoteResult[str]:
        path = DELETE_EMPLOYEE_BY_ID.format(employee_id=employee_id)
        result = await self._request("DELETE", path, EmployeeDeleteResponse)
        return result.map(lambda envelope: envelope.message or "")

    async def check_connection(self) -> bool:
        url = f"{self.base_url}{FETCH_ALL_EMPLOYEES}"
        try:
            timeout = aiohttp.ClientTimeout(total=self.timeout)
            async with aiohttp.ClientSession(timeout=timeout) as session:
                async with session.request("GET", url, headers=_HEADERS) as response:
                    return response.status < 500
        except Exception:
            logger.exception("Directory API connection check failed")
            return False

    async def _request(
        self,
        method: str,
        path: str,
        model: type[M],
        payload: dict[str, Any] | None = None,
    ) -> RemoteResult[M]:
        url = f"{self.base_url}{path}"
        logger.debug("%s %s", method, url)

        try:
            timeout = aiohttp.ClientTimeout(total=self.timeout)
            async with aiohttp.ClientSession(timeout=timeout) as session:
                async with session.request(method, url, headers=_HEADERS, json=payload) as response:
                    if 200 <= response.status < 300:
                        body = await response.json()
                        if body is None:
                            # empty body: an envelope without data
                            body = {}
                        return RemoteResult.success(model.model_validate(body))

                    error_text = await response.text()
                    failure = classify_status(response.status, error_text)
                    logger.warning("%s %s returned %d (%s)", method, url, response.status, failure.kind.value)
                    return RemoteResult(failure=failure)
        except (aiohttp.ClientConnectionError, asyncio.TimeoutError) as err:
            logger.warning("%s %s unreachable: %r", method, url, err)
            detail = str(err) or type(err).__name__
            return RemoteResult.failed(FailureKind.UNREACHABLE, UpstreamUnavailable(detail))
        except (aiohttp.ContentTypeError, ValueError) as err:
            # ValueError covers undecodable JSON and pydantic validation errors
            logger.error("%s %s returned an unreadable payload: %s", method, url, err)
            return RemoteResult.failed(FailureKind.OTHER, err)
