"""Query models for listing records."""

import re
from typing import Any, List, Optional

from pydantic import BaseModel, Field

from form_store.models.record import Record
from form_store.models.types import SortOrder

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 10
DEFAULT_SORT_BY = "createdAt"
DEFAULT_SORT_ORDER = SortOrder.DESC

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _positive_int(value: Any, default: int) -> int:
    """Read the leading integer of a raw parameter, falling back to the default if not positive."""
    if value is None or isinstance(value, bool):
        return default
    if isinstance(value, int):
        number = value
    else:
        match = _LEADING_INT.match(str(value))
        if not match:
            return default
        number = int(match.group(1))
    return number if number > 0 else default


class RecordQuery(BaseModel):
    """Listing parameters: free-text search, single-key sort and page slicing."""

    page: int = Field(default=DEFAULT_PAGE, ge=1, description="1-based page number")
    limit: int = Field(default=DEFAULT_LIMIT, ge=1, description="Maximum number of records per page")
    sort_by: str = Field(default=DEFAULT_SORT_BY, alias="sortBy", description="Record attribute or data field to sort on")
    sort_order: SortOrder = Field(default=DEFAULT_SORT_ORDER, alias="sortOrder", description="Sort direction")
    search: str = Field(default="", description="Case-insensitive substring matched against record data values")

    model_config = {"populate_by_name": True}

    @classmethod
    def from_params(
        cls,
        page: Any = None,
        limit: Any = None,
        sort_by: Optional[str] = None,
        sort_order: Optional[str] = None,
        search: Optional[str] = None,
    ) -> "RecordQuery":
        """Build a query from raw, untrusted parameters.

        Missing, non-numeric or non-positive page and limit values fall back to
        their defaults, and any sort order other than ``asc`` means descending.
        """
        order = SortOrder.ASC if str(sort_order or "").strip().lower() == SortOrder.ASC.value else SortOrder.DESC
        return cls(
            page=_positive_int(page, DEFAULT_PAGE),
            limit=_positive_int(limit, DEFAULT_LIMIT),
            sort_by=sort_by or DEFAULT_SORT_BY,
            sort_order=order,
            search=search or "",
        )


class QueryMeta(BaseModel):
    """Pagination metadata of a listing."""

    total: int = Field(description="Number of records matching the search")
    page: int
    limit: int
    total_pages: int = Field(alias="totalPages")

    model_config = {"populate_by_name": True}


class QueryResult(BaseModel):
    """One page of records with its pagination metadata."""

    data: List[Record]
    meta: QueryMeta
