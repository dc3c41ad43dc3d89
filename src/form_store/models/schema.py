"""Schema model definitions for the form store module."""

from typing import Any, Dict, Iterator, List, Tuple

from pydantic import BaseModel, Field, model_validator

from form_store.exceptions import InvalidFormSchemaError
from form_store.models.field import FormField


class FormSchema(BaseModel):
    """Declarative description of a form. Field order defines validation and error order."""

    title: str = Field(description="Title of the form", json_schema_extra={"examples": ["Employee Onboarding"]})
    description: str = Field(default="", description="Text displayed under the title")
    fields: Tuple[FormField, ...] = Field(default_factory=tuple, description="Ordered list of fields in the form")

    model_config = {"frozen": True, "populate_by_name": True}

    @model_validator(mode="after")
    def validate_unique_fields(self) -> "FormSchema":
        """Validate field ids are unique."""
        field_ids = [field.id for field in self.fields]
        if len(field_ids) != len(set(field_ids)):
            duplicates = sorted({field_id for field_id in field_ids if field_ids.count(field_id) > 1})
            raise InvalidFormSchemaError(f"Duplicate field ids in schema: {', '.join(duplicates)}")
        return self

    def __len__(self) -> int:
        """Get number of fields in schema."""
        return len(self.fields)

    def __getitem__(self, index: int) -> FormField:
        """Get field at index."""
        return self.fields[index]

    def __iter__(self) -> Iterator[FormField]:
        """Iterate over fields in the schema."""
        return iter(self.fields)

    def get_field(self, field_id: str) -> FormField:
        """Get field from schema by id.

        Args:
            field_id: Id of the field to get

        Returns:
            FormField: The field descriptor

        Raises:
            KeyError: If field not found
        """
        for field in self.fields:
            if field.id == field_id:
                return field
        raise KeyError(f"Field '{field_id}' not found in schema")

    def has_field(self, field_id: str) -> bool:
        """Check if field exists in schema."""
        return any(field.id == field_id for field in self.fields)

    def get_field_ids(self) -> List[str]:
        """Get list of all field ids in schema order."""
        return [field.id for field in self.fields]

    def to_document(self) -> Dict[str, Any]:
        """Render the schema as the JSON document clients receive.

        Only keys that were set are emitted, so a schema loaded from a document
        renders back as the same document.
        """
        return self.model_dump(mode="json", by_alias=True, exclude_unset=True, exclude_none=True)
