"""Query pipeline over a snapshot of records: search, sort and paginate."""

import math
from typing import Any, List, Optional, Sequence

from form_store.exceptions import InvalidQueryError
from form_store.models.query import QueryMeta, QueryResult, RecordQuery
from form_store.models.record import Record
from form_store.models.types import SortOrder
from form_store.values import ValueKind, kind_of, sort_key, stringify

# Record attributes addressable by ``sortBy`` before falling back to data keys
RECORD_SORT_ATTRIBUTES = {"id": "id", "createdAt": "created_at"}


def _matches(record: Record, term: str) -> bool:
    """Check whether any data value contains the lowercased term."""
    return any(term in stringify(value).lower() for value in record.data.values())


def _filter_stage(records: Sequence[Record], search: str) -> List[Record]:
    """Keep records whose data matches the search term. Empty terms keep everything."""
    if not search:
        return list(records)
    term = search.lower()
    return [record for record in records if _matches(record, term)]


def resolve_sort_value(record: Record, sort_by: str) -> Any:
    """Value a record sorts on: a record attribute if ``sort_by`` names one, else its data entry."""
    attribute = RECORD_SORT_ATTRIBUTES.get(sort_by)
    if attribute is not None:
        return getattr(record, attribute)
    return record.data.get(sort_by)


def _sort_stage(records: List[Record], sort_by: str, sort_order: SortOrder) -> List[Record]:
    """Stable sort on a single key.

    Records without a value for the key keep their relative order and follow
    every record that has one, whatever the direction.
    """
    present = []
    missing = []
    for record in records:
        value = resolve_sort_value(record, sort_by)
        if kind_of(value) is ValueKind.MISSING:
            missing.append(record)
        else:
            present.append((sort_key(value), record))

    # reverse=True keeps equal keys in their original order
    present.sort(key=lambda item: item[0], reverse=sort_order == SortOrder.DESC)
    return [record for _, record in present] + missing


def _paginate_stage(records: List[Record], page: int, limit: int) -> List[Record]:
    start = (page - 1) * limit
    return records[start : start + limit]


def run_query(records: Sequence[Record], query: Optional[RecordQuery] = None) -> QueryResult:
    """Run a listing query over a snapshot of records.

    Args:
        records: Records in insertion order; the sequence is not modified
        query: Listing parameters, already normalized; defaults when omitted

    Returns:
        QueryResult: The requested page and metadata computed on the filtered set

    Raises:
        InvalidQueryError: If page or limit is not a positive integer
    """
    query = query or RecordQuery()
    if query.page < 1 or query.limit < 1:
        raise InvalidQueryError(f"Page and limit must be positive integers, got page={query.page} limit={query.limit}")

    filtered = _filter_stage(records, query.search)
    ordered = _sort_stage(filtered, query.sort_by, query.sort_order)
    page = _paginate_stage(ordered, query.page, query.limit)

    total = len(filtered)
    meta = QueryMeta(total=total, page=query.page, limit=query.limit, total_pages=math.ceil(total / query.limit))
    return QueryResult(data=page, meta=meta)
