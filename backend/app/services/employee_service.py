"""Employee directory operations: validation, remote/cache orchestration, aggregation."""

from __future__ import annotations

import logging
from typing import Any

from app.core.errors import DataNotFound, UpstreamError
from app.models.employee import Employee
from app.services.aggregation import (
    DEFAULT_TOP_EARNERS,
    filter_by_name,
    highest_salary,
    top_earner_names,
)
from app.services.cache_store import EmployeeCacheStore
from app.services.directory_client import DirectoryClient
from app.services.orchestrator import FallbackOrchestrator
from app.services.validation import (
    validate_creation_input,
    validate_employee_id,
    validate_search_string,
)

logger = logging.getLogger(__name__)


class EmployeeService:
    def __init__(
        self,
        client: DirectoryClient,
        cache: EmployeeCacheStore,
        top_earners_limit: int = DEFAULT_TOP_EARNERS,
    ) -> None:
        self.orchestrator = FallbackOrchestrator(client, cache)
        self.top_earners_limit = top_earners_limit

    async def get_all_employees(self) -> list[Employee]:
        logger.info("Fetching all employees")
        return await self.orchestrator.list_all()

    async def search_employees_by_name(self, search: str | None) -> list[Employee]:
        search = validate_search_string(search)
        employees = await self.orchestrator.list_all()
        logger.info("Filtering employee names by search string %r", search)
        return filter_by_name(employees, search)

    async def get_employee_by_id(self, raw_id: str | None) -> Employee:
        employee_id = validate_employee_id(raw_id)
        logger.info("Fetching employee details for id %s", employee_id)
        return await self.orchestrator.get_by_id(employee_id)

    async def get_highest_salary(self) -> int:
        employees = await self.orchestrator.list_all()
        logger.info("Computing highest salary over %d employees", len(employees))
        return highest_salary(employees)

    async def get_top_earning_names(self) -> list[str]:
        employees = await self.orchestrator.list_all()
        logger.info("Selecting the top %d earners", self.top_earners_limit)
        return top_earner_names(employees, self.top_earners_limit)

    async def create_employee(self, data: dict[str, Any] | None) -> Employee:
        payload = validate_creation_input(data)
        logger.info("Creating employee %s", payload.name)
        return await self.orchestrator.create(payload.model_dump())

    async def delete_employee_by_id(self, raw_id: str | None) -> str:
        employee_id = validate_employee_id(raw_id)
        logger.info("Deleting employee %s", employee_id)
        return await self.orchestrator.delete_by_id(employee_id)

    async def warm_cache(self) -> int:
        """Populate the cache from the remote list. Returns the number of employees cached.

        The cache is never read here: an unavailable remote skips the warm-up.
        """
        try:
            employees = await self.orchestrator.refresh()
        except (DataNotFound, UpstreamError) as err:
            logger.warning("Cache warm-up skipped: %s", err)
            return 0
        logger.info("Cache warm-up complete: %d employees", len(employees))
        return len(employees)
