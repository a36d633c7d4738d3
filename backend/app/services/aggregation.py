"""Salary aggregation and name search over an already-resolved employee list."""

from __future__ import annotations

from collections.abc import Sequence

from app.core.errors import DataNotFound, InvalidArgument
from app.models.employee import Employee

DEFAULT_TOP_EARNERS = 10


def highest_salary(employees: Sequence[Employee]) -> int:
    if not employees:
        raise DataNotFound()
    return max(employee.salary for employee in employees)


def top_earner_names(employees: Sequence[Employee], limit: int = DEFAULT_TOP_EARNERS) -> list[str]:
    """Names of the ``limit`` best paid employees, highest salary first.

    ``sorted`` is stable with ``reverse=True`` too, so equal salaries keep
    their original relative order.
    """
    if limit < 0:
        raise InvalidArgument("limit must not be negative")
    ranked = sorted(employees, key=lambda employee: employee.salary, reverse=True)
    return [employee.name for employee in ranked[:limit]]


def filter_by_name(employees: Sequence[Employee], search: str) -> list[Employee]:
    needle = search.lower()
    return [employee for employee in employees if needle in employee.name.lower()]
