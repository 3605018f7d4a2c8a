# app/utils/pagination.py
import math

from sqlalchemy import asc, desc

from app.schemas.common import Pagination
from app.utils.errors import ValidationError

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 10
MAX_LIMIT = 100


def page_offset(page: int, limit: int) -> int:
    """Rows to skip for a 1-indexed page"""
    return (page - 1) * limit


def build_pagination(total: int, page: int, limit: int) -> Pagination:
    return Pagination(
        total=total,
        page=page,
        limit=limit,
        total_pages=math.ceil(total / limit) if limit else 0,
    )


def order_clause(sort_fields: dict, sort_by: str, order: str):
    """Resolve a client sortBy/order pair against an allow-list of columns"""
    column = sort_fields.get(sort_by)
    if column is None:
        allowed = ", ".join(sorted(sort_fields))
        raise ValidationError(f"Invalid sortBy '{sort_by}'. Allowed: {allowed}")

    direction = (order or "desc").lower()
    if direction not in ("asc", "desc"):
        raise ValidationError("order must be 'asc' or 'desc'")
    return asc(column) if direction == "asc" else desc(column)


def like_pattern(term: str) -> str:
    """Substring pattern for ILIKE with wildcard characters escaped"""
    escaped = term.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
    return f"%{escaped}%"


def optional_filter(value, allowed, field_name: str):
    """Blank filters mean 'no filter'; anything else must be an allowed value"""
    if value is None or not str(value).strip():
        return None
    value = str(value).strip()
    if value not in allowed:
        raise ValidationError(f"Invalid {field_name} '{value}'. Allowed: {', '.join(allowed)}")
    return value
