"""Custom exceptions for the form store module."""

from typing import Dict


class FormStoreError(Exception):
    """Base exception for form store errors."""

    pass


class FormSchemaError(FormStoreError):
    """Base exception for form schema errors."""

    pass


class InvalidFormSchemaError(FormSchemaError):
    """Raised when the form schema is invalid."""

    pass


class RecordError(FormStoreError):
    """Base exception for record-related errors."""

    pass


class RecordNotFoundError(RecordError):
    """Raised when a record is not found."""

    def __init__(self, record_id: str):
        self.record_id = record_id
        super().__init__(f"Record {record_id} not found")


class RecordValidationError(RecordError):
    """Raised when record data does not satisfy the form schema.

    Attributes:
        errors: Mapping from field id to a single human-readable message
    """

    def __init__(self, errors: Dict[str, str]):
        self.errors = dict(errors)
        super().__init__(f"Record data failed validation for fields: {', '.join(self.errors)}")


class QueryError(FormStoreError):
    """Base exception for query errors."""

    pass


class InvalidQueryError(QueryError):
    """Raised when query parameters reach the engine without normalization."""

    pass
