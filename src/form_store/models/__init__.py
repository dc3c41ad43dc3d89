"""Models package for form store."""

from form_store.models.field import FieldOption, FormField, ValidationRules
from form_store.models.query import QueryMeta, QueryResult, RecordQuery
from form_store.models.record import Record, RecordData
from form_store.models.schema import FormSchema
from form_store.models.types import FieldType, SortOrder, ValidationMode

__all__ = [
    "FieldOption",
    "FieldType",
    "FormField",
    "FormSchema",
    "QueryMeta",
    "QueryResult",
    "Record",
    "RecordData",
    "RecordQuery",
    "SortOrder",
    "ValidationMode",
    "ValidationRules",
]
