# app/schemas/common.py
from datetime import date, datetime, timezone
from typing import Any, Generic, Optional, TypeVar

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

T = TypeVar("T")


class CamelModel(BaseModel):
    """Base schema: snake_case attributes, camelCase JSON"""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class RequestModel(CamelModel):
    """Base schema for request bodies; unknown fields are rejected"""

    model_config = ConfigDict(extra="forbid", use_enum_values=True)


class Pagination(CamelModel):
    total: int
    page: int
    limit: int
    total_pages: int


class ApiResponse(CamelModel, Generic[T]):
    success: bool = True
    message: Optional[str] = None
    data: Optional[T] = None
    pagination: Optional[Pagination] = None


def parse_date_value(value: Any) -> Any:
    """Accept plain dates as well as ISO datetime strings for date fields"""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, str):
        text = value.strip()
        if len(text) > 10:
            return datetime.fromisoformat(text.replace("Z", "+00:00")).date()
        return text
    return value


def parse_datetime_value(value: Any) -> Any:
    """Parse ISO date/datetime strings and normalise to naive UTC"""
    if isinstance(value, str):
        text = value.strip()
        if not text:
            return None
        value = datetime.fromisoformat(text.replace("Z", "+00:00"))
    elif isinstance(value, date) and not isinstance(value, datetime):
        value = datetime(value.year, value.month, value.day)

    if isinstance(value, datetime) and value.tzinfo is not None:
        value = value.astimezone(timezone.utc).replace(tzinfo=None)
    return value


def reject_null(value: Any, field_name: str) -> Any:
    if value is None:
        raise ValueError(f"{field_name} cannot be null")
    return value
