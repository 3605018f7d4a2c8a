# app/schemas/employee.py
from datetime import date, datetime
from typing import Any, Dict, List, Optional

from pydantic import EmailStr, Field, field_validator

from app.models.employee import EmployeeStatus
from app.schemas.common import CamelModel, RequestModel, parse_date_value, reject_null
from app.schemas.task import TaskBrief, TaskOut


class EmployeeCreate(RequestModel):
    first_name: str = Field(min_length=1)
    last_name: str = Field(min_length=1)
    email: EmailStr
    phone: Optional[str] = None
    department: str = Field(min_length=1)
    position: str = Field(min_length=1)
    salary: float = Field(ge=0)
    hire_date: date
    status: EmployeeStatus = EmployeeStatus.ACTIVE
    avatar: Optional[str] = None

    @field_validator("hire_date", mode="before")
    @classmethod
    def parse_hire_date(cls, v):
        return parse_date_value(v)


class EmployeeUpdate(RequestModel):
    first_name: Optional[str] = Field(default=None, min_length=1)
    last_name: Optional[str] = Field(default=None, min_length=1)
    email: Optional[EmailStr] = None
    phone: Optional[str] = None
    department: Optional[str] = Field(default=None, min_length=1)
    position: Optional[str] = Field(default=None, min_length=1)
    salary: Optional[float] = Field(default=None, ge=0)
    hire_date: Optional[date] = None
    status: Optional[EmployeeStatus] = None
    avatar: Optional[str] = None

    @field_validator("hire_date", mode="before")
    @classmethod
    def parse_hire_date(cls, v):
        return parse_date_value(v)

    @field_validator(
        "first_name", "last_name", "email", "department",
        "position", "salary", "hire_date", "status",
    )
    @classmethod
    def not_nullable(cls, v, info):
        return reject_null(v, info.field_name)


class EmployeeBrief(CamelModel):
    """Employee projection embedded in task listings"""

    id: int
    first_name: str
    last_name: str
    email: str
    department: str


class EmployeeOut(CamelModel):
    id: int
    first_name: str
    last_name: str
    email: str
    phone: Optional[str] = None
    department: str
    position: str
    salary: float
    hire_date: date
    status: str
    avatar: Optional[str] = None
    created_at: datetime
    updated_at: datetime


class EmployeeListItem(EmployeeOut):
    tasks: List[TaskBrief] = []


class EmployeeDetail(EmployeeOut):
    tasks: List[TaskOut] = []


class EmployeeStats(CamelModel):
    total_employees: int
    active_employees: int
    # Everyone whose status is not "active", on-leave included
    inactive_employees: int
    on_leave_employees: int
    department_stats: List[Dict[str, Any]]
    status_stats: List[Dict[str, Any]]
