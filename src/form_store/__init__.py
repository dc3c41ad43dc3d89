"""Form store package."""

from form_store.exceptions import (
    FormSchemaError,
    FormStoreError,
    InvalidFormSchemaError,
    InvalidQueryError,
    QueryError,
    RecordError,
    RecordNotFoundError,
    RecordValidationError,
)
from form_store.loader import load_form_schema
from form_store.manager import FormManager
from form_store.models import FormSchema, Record, RecordQuery
from form_store.pipeline import run_query
from form_store.store import RecordStore
from form_store.validators import validate_record_data

__all__ = [
    # Main classes
    "FormManager",
    "RecordStore",
    # Functions
    "load_form_schema",
    "run_query",
    "validate_record_data",
    # Models
    "FormSchema",
    "Record",
    "RecordQuery",
    # Exceptions
    "FormStoreError",
    "FormSchemaError",
    "InvalidFormSchemaError",
    "InvalidQueryError",
    "QueryError",
    "RecordError",
    "RecordNotFoundError",
    "RecordValidationError",
]
