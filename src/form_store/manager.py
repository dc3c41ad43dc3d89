"""Form manager: validation and record operations for one form."""

from typing import Optional

from form_store.exceptions import RecordNotFoundError, RecordValidationError
from form_store.models.query import QueryResult, RecordQuery
from form_store.models.record import Record, RecordData
from form_store.models.schema import FormSchema
from form_store.models.types import ValidationMode
from form_store.pipeline import run_query
from form_store.store import RecordStore
from form_store.validators import validate_record_data
from utils.logging import logger


class FormManager:
    """Manager for a form schema and the records submitted against it.

    Created once per application and injected into the transport layer. Each
    instance owns its own store, so separate instances never share records.
    """

    def __init__(
        self,
        schema: FormSchema,
        store: Optional[RecordStore] = None,
        validation_mode: ValidationMode = ValidationMode.LAST,
        revalidate_on_update: bool = False,
        reject_unknown_fields: bool = False,
    ) -> None:
        self.schema = schema
        self.store = store if store is not None else RecordStore()
        self.validation_mode = ValidationMode(validation_mode)
        self.revalidate_on_update = revalidate_on_update
        self.reject_unknown_fields = reject_unknown_fields

    def validate(self, data: RecordData) -> None:
        """Validate data against the schema.

        Raises:
            RecordValidationError: If any field fails its rules
        """
        errors = validate_record_data(
            data,
            self.schema,
            mode=self.validation_mode,
            reject_unknown_fields=self.reject_unknown_fields,
        )
        if errors:
            raise RecordValidationError(errors)

    def create_record(self, data: RecordData) -> Record:
        """Validate a submission and store it as a new record."""
        logger.info(f"Creating record for form '{self.schema.title}'")
        try:
            self.validate(data)
        except RecordValidationError as e:
            logger.info(f"Record rejected, invalid fields: {', '.join(e.errors)}")
            raise

        record = self.store.append(data)
        logger.info(f"Record created with ID: {record.id}")
        return record

    def list_records(self, query: Optional[RecordQuery] = None) -> QueryResult:
        """Search, sort and paginate the stored records."""
        query = query or RecordQuery()
        logger.debug(
            f"Querying records: page={query.page} limit={query.limit} sort_by={query.sort_by} "
            f"sort_order={query.sort_order.value} search={query.search!r}"
        )
        result = run_query(self.store.snapshot(), query)
        logger.debug(f"Query returned {len(result.data)} of {result.meta.total} matching records")
        return result

    def get_record(self, record_id: str) -> Record:
        """Retrieve a specific record.

        Raises:
            RecordNotFoundError: If no record has this id
        """
        logger.debug(f"Getting record {record_id}")
        record = self.store.get(record_id)
        if record is None:
            raise RecordNotFoundError(record_id)
        return record

    def update_record(self, record_id: str, data: RecordData) -> Record:
        """Merge values into an existing record.

        The merged data is validated first only when ``revalidate_on_update``
        is enabled; otherwise it is written as given.

        Raises:
            RecordNotFoundError: If no record has this id
            RecordValidationError: If re-validation is enabled and the merged data is invalid
        """
        logger.info(f"Updating record {record_id}")
        if self.revalidate_on_update:
            existing = self.get_record(record_id)
            self.validate({**existing.data, **data})

        record = self.store.update(record_id, data)
        if record is None:
            raise RecordNotFoundError(record_id)
        logger.info("Record updated successfully")
        return record

    def delete_record(self, record_id: str) -> None:
        """Delete a record.

        Raises:
            RecordNotFoundError: If no record has this id
        """
        logger.info(f"Deleting record {record_id}")
        if not self.store.delete(record_id):
            raise RecordNotFoundError(record_id)
        logger.info("Record deleted successfully")
