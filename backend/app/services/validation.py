"""Validation and normalization of untyped caller input."""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping
from typing import Any

from app.core.errors import IncompleteData, InvalidArgument, InvalidNumericFormat
from app.models.employee import EmployeeCreate

logger = logging.getLogger(__name__)

EMP_NAME = "name"
EMP_SALARY = "salary"
EMP_AGE = "age"

_INTEGER = re.compile(r"[+-]?[0-9]+")

INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1


def _parse_int(value: Any) -> int:
    if isinstance(value, bool):
        raise ValueError(f"not an integer: {value!r}")
    if isinstance(value, int):
        parsed = value
    elif isinstance(value, str) and _INTEGER.fullmatch(value):
        parsed = int(value)
    else:
        raise ValueError(f"not an integer: {value!r}")
    if not INT32_MIN <= parsed <= INT32_MAX:
        raise ValueError(f"out of 32-bit integer range: {value!r}")
    return parsed


def validate_creation_input(data: Mapping[str, Any] | None) -> EmployeeCreate:
    required = (EMP_NAME, EMP_SALARY, EMP_AGE)
    if not data or any(data.get(field) is None for field in required):
        logger.error("Incomplete employee data: %s", data)
        raise IncompleteData("Incomplete data provided, please provide name, age, salary")

    name = str(data[EMP_NAME]).strip()
    if not name:
        raise IncompleteData("Incomplete data provided, please provide name, age, salary")

    try:
        salary = _parse_int(data[EMP_SALARY])
        age = _parse_int(data[EMP_AGE])
    except ValueError as err:
        logger.error("Invalid data provided for age and salary: %s", err)
        raise InvalidNumericFormat(
            "Invalid data provided for age and salary, please provide valid integer"
        ) from err

    if age < 0 or salary < 0:
        raise InvalidArgument("Invalid data provided for field age and salary")

    return EmployeeCreate(name=name, salary=salary, age=age)


def validate_employee_id(raw: str | int | None) -> int:
    if raw is None or raw == "":
        raise InvalidArgument("Data should not empty or null")
    try:
        return _parse_int(raw)
    except ValueError as err:
        logger.error("Invalid input provided for field id: %r, expecting integer value", raw)
        raise InvalidNumericFormat("Invalid data provided for id, please provide valid integer") from err


def validate_search_string(raw: str | None) -> str:
    if raw is None:
        raise InvalidArgument("Search string should not be null")
    return raw
