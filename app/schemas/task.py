# app/schemas/task.py
from datetime import datetime
from typing import Optional

from pydantic import Field, field_validator

from app.models.task import TaskStatus, TaskPriority
from app.schemas.common import CamelModel, RequestModel, parse_datetime_value, reject_null


class TaskCreate(RequestModel):
    title: str = Field(min_length=1)
    description: Optional[str] = None
    status: TaskStatus = TaskStatus.PENDING
    priority: TaskPriority = TaskPriority.MEDIUM
    due_date: Optional[datetime] = None
    employee_id: int

    @field_validator("due_date", mode="before")
    @classmethod
    def parse_due_date(cls, v):
        return parse_datetime_value(v)


class TaskUpdate(RequestModel):
    title: Optional[str] = Field(default=None, min_length=1)
    description: Optional[str] = None
    status: Optional[TaskStatus] = None
    priority: Optional[TaskPriority] = None
    due_date: Optional[datetime] = None
    employee_id: Optional[int] = None

    @field_validator("due_date", mode="before")
    @classmethod
    def parse_due_date(cls, v):
        return parse_datetime_value(v)

    @field_validator("title", "status", "priority", "employee_id")
    @classmethod
    def not_nullable(cls, v, info):
        return reject_null(v, info.field_name)


class TaskStatusUpdate(RequestModel):
    status: TaskStatus


class TaskBrief(CamelModel):
    """Task projection embedded in employee listings"""

    id: int
    title: str
    status: str
    priority: str


class TaskOut(CamelModel):
    id: int
    title: str
    description: Optional[str] = None
    status: str
    priority: str
    due_date: Optional[datetime] = None
    employee_id: int
    created_at: datetime
    updated_at: datetime


# Employee schemas are bound in app/schemas/__init__.py (circular import)
class TaskListItem(TaskOut):
    employee: "EmployeeBrief"


class TaskDetail(TaskOut):
    employee: "EmployeeOut"


class TaskStats(CamelModel):
    total_tasks: int
    status_stats: list
    priority_stats: list
    overdue_tasks: int
