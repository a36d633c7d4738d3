"""Remote-first employee operations with cache population and cache fallback.

Reads (list-all, get-by-id) fall back to the cache when the remote directory
fails transiently. Writes (create, delete) never fall back: a destructive or
creative operation must not be satisfied from local state alone.
"""

from __future__ import annotations

import logging
from typing import Awaitable, Callable, TypeVar

from app.core.errors import DataNotFound, UpstreamPayloadError
from app.models.employee import Employee, RemoteEmployeeRecord
from app.services.cache_store import EmployeeCacheStore
from app.services.directory_client import DirectoryClient, RemoteResult

logger = logging.getLogger(__name__)

R = TypeVar("R")
T = TypeVar("T")


async def call_with_fallback(
    operation: str,
    primary: Callable[[], Awaitable[RemoteResult[R]]],
    on_success: Callable[[R], Awaitable[T]],
    fallback: Callable[[], Awaitable[T]] | None = None,
) -> T:
    """Run ``primary``; hand its payload to ``on_success`` or recover via ``fallback``.

    Transient failures (client, server, unreachable) go to ``fallback`` when one
    is given. Every other failure, or a transient one without a fallback, is
    raised as the error the client classified it with.
    """
    result = await primary()
    if result.failure is None:
        return await on_success(result.value)  # type: ignore[arg-type]

    failure = result.failure
    if failure.kind.transient and fallback is not None:
        logger.warning(
            "%s failed upstream (%s: %s), falling back to cache",
            operation,
            failure.kind.value,
            failure.error,
        )
        return await fallback()

    logger.error("%s failed upstream (%s): %s", operation, failure.kind.value, failure.error)
    raise failure.error


class FallbackOrchestrator:
    def __init__(self, client: DirectoryClient, cache: EmployeeCacheStore) -> None:
        self.client = client
        self.cache = cache

    async def list_all(self) -> list[Employee]:
        logger.info("Fetching the employee list from the directory API")
        return await call_with_fallback(
            "list-all",
            self.client.list_all,
            self._accept_list,
            fallback=self._cached_list,
        )

    async def refresh(self) -> list[Employee]:
        """Remote list into the cache with no fallback; transient failures raise."""
        logger.info("Refreshing the employee cache from the directory API")
        return await call_with_fallback("refresh", self.client.list_all, self._accept_list)

    async def get_by_id(self, employee_id: int) -> Employee:
        async def primary() -> RemoteResult[RemoteEmployeeRecord | None]:
            return await self.client.get_by_id(employee_id)

        async def fallback() -> Employee:
            return await self._cached_employee(employee_id)

        return await call_with_fallback(
            f"get-by-id {employee_id}",
            primary,
            self._accept_single,
            fallback=fallback,
        )

    async def delete_by_id(self, employee_id: int) -> str:
        async def primary() -> RemoteResult[str]:
            return await self.client.delete_by_id(employee_id)

        async def forget(message: str) -> str:
            await self._evict(employee_id)
            logger.info("Employee %s deleted upstream", employee_id)
            return message

        return await call_with_fallback(f"delete-by-id {employee_id}", primary, forget)

    async def create(self, fields: dict) -> Employee:
        async def primary() -> RemoteResult[Employee | None]:
            return await self.client.create(fields)

        return await call_with_fallback("create", primary, self._accept_created)

    async def _accept_list(self, records: list[RemoteEmployeeRecord] | None) -> list[Employee]:
        if not records:
            logger.error("Directory API returned no employees")
            raise DataNotFound()
        employees = [record.to_employee() for record in records]
        await self._save_all(employees)
        return employees

    async def _accept_single(self, record: RemoteEmployeeRecord | None) -> Employee:
        if record is None:
            raise DataNotFound()
        logger.info("Data for id %s found on the directory API", record.id)
        employee = record.to_employee()
        await self._save(employee)
        return employee

    async def _accept_created(self, employee: Employee | None) -> Employee:
        if employee is None:
            raise UpstreamPayloadError("Create response carried no employee data")
        await self._save(employee)
        logger.info("Employee record for id %s created", employee.id)
        return employee

    async def _cached_list(self) -> list[Employee]:
        logger.info("Fetching all employees from the cache")
        return await self.cache.find_all()

    async def _cached_employee(self, employee_id: int) -> Employee:
        logger.info("Retrieving employee %s from the cache", employee_id)
        employee = await self.cache.find_by_id(employee_id)
        if employee is None:
            raise DataNotFound()
        return employee

    async def _save_all(self, employees: list[Employee]) -> None:
        try:
            await self.cache.upsert_all(employees)
        except Exception:
            logger.exception("Failed to save %d employees into the cache", len(employees))

    async def _save(self, employee: Employee) -> None:
        try:
            await self.cache.upsert(employee)
        except Exception:
            logger.exception("Failed to save employee %s into the cache", employee.id)

    async def _evict(self, employee_id: int) -> None:
        try:
            employee = await self.cache.find_by_id(employee_id)
            if employee is None:
                logger.info("Employee %s not present in the cache", employee_id)
                return
            await self.cache.delete(employee)
        except Exception:
            logger.exception("Failed to remove employee %s from the cache", employee_id)
