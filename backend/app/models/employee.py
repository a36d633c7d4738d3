"""Employee models: the domain shape and the remote directory wire shapes."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class Employee(BaseModel):
    """Employee as served by this API and stored in the cache."""

    id: int
    name: str
    salary: int
    age: int
    profile_image: str | None = None


class EmployeeCreate(BaseModel):
    """Validated creation payload forwarded to the remote directory."""

    name: str
    salary: int
    age: int


class RemoteEmployeeRecord(BaseModel):
    """Employee record as returned by the remote directory API."""

    model_config = ConfigDict(populate_by_name=True)

    id: int
    name: str = Field(alias="employee_name")
    salary: int = Field(alias="employee_salary")
    age: int = Field(alias="employee_age")
    profile_image: str | None = None

    def to_employee(self) -> Employee:
        return Employee(
            id=self.id,
            name=self.name,
            salary=self.salary,
            age=self.age,
            profile_image=self.profile_image,
        )


class RemoteEnvelope(BaseModel):
    status: str | None = None
    message: str | None = None


class EmployeeListResponse(RemoteEnvelope):
    data: list[RemoteEmployeeRecord] | None = None


class EmployeeResponse(RemoteEnvelope):
    data: RemoteEmployeeRecord | None = None


class EmployeeCreateResponse(RemoteEnvelope):
    data: Employee | None = None


class EmployeeDeleteResponse(RemoteEnvelope):
    data: str | int | None = None
