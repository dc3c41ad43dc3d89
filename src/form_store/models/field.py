"""Field model definitions for the form store module."""

import re
from typing import Optional, Tuple, Union

from pydantic import BaseModel, Field, field_validator, model_validator

from form_store.exceptions import InvalidFormSchemaError
from form_store.models.types import OPTION_FIELD_TYPES, FieldType
from form_store.values import parse_date

Number = Union[int, float]


class FieldOption(BaseModel):
    """A selectable option of a select or multi-select field."""

    label: str = Field(description="Text displayed for the option", json_schema_extra={"examples": ["Engineering"]})
    value: str = Field(description="Value stored when the option is chosen", json_schema_extra={"examples": ["engineering"]})

    model_config = {"frozen": True}


class ValidationRules(BaseModel):
    """Sparse rule set attached to a field. Only rules relevant to the field type are consulted."""

    required: bool = Field(default=False, description="Whether the value must be present and non-empty")
    min_length: Optional[int] = Field(default=None, alias="minLength", description="Minimum string length (text/textarea)")
    max_length: Optional[int] = Field(default=None, alias="maxLength", description="Maximum string length (text/textarea)")
    pattern: Optional[str] = Field(default=None, description="Regular expression the value must match (text/textarea)")
    min: Optional[Number] = Field(default=None, description="Minimum numeric value (number)")
    max: Optional[Number] = Field(default=None, description="Maximum numeric value (number)")
    min_date: Optional[str] = Field(default=None, alias="minDate", description="Earliest accepted ISO date (date)")
    min_selected: Optional[int] = Field(default=None, alias="minSelected", description="Minimum number of chosen options (multi-select)")
    max_selected: Optional[int] = Field(default=None, alias="maxSelected", description="Maximum number of chosen options (multi-select)")

    model_config = {"frozen": True, "populate_by_name": True}

    @field_validator("pattern")
    @classmethod
    def validate_pattern(cls, value: Optional[str]) -> Optional[str]:
        if value is not None:
            try:
                re.compile(value)
            except re.error as e:
                raise InvalidFormSchemaError(f"Invalid validation pattern '{value}': {str(e)}")
        return value

    @field_validator("min_date")
    @classmethod
    def validate_min_date(cls, value: Optional[str]) -> Optional[str]:
        if value is not None and parse_date(value) is None:
            raise InvalidFormSchemaError(f"Invalid minDate '{value}'. Expected an ISO date")
        return value


class FormField(BaseModel):
    """Descriptor of a single form input."""

    id: str = Field(description="Identifier of the field, unique within the schema", min_length=1, json_schema_extra={"examples": ["fullName"]})
    type: FieldType = Field(description="Type of the field", json_schema_extra={"examples": [FieldType.TEXT]})
    label: str = Field(description="Label displayed next to the input", json_schema_extra={"examples": ["Full Name"]})
    placeholder: Optional[str] = Field(default=None, description="Hint displayed inside an empty input")
    options: Optional[Tuple[FieldOption, ...]] = Field(default=None, description="Allowed options for select/multi-select fields")
    validation: Optional[ValidationRules] = Field(default=None, description="Validation rules for the field")

    model_config = {"frozen": True, "populate_by_name": True, "from_attributes": True}

    @model_validator(mode="after")
    def validate_options(self) -> "FormField":
        """Select and multi-select fields need at least one option."""
        if self.type in OPTION_FIELD_TYPES and not self.options:
            raise InvalidFormSchemaError(f"Options not provided for {self.type.value} field '{self.id}'")
        return self

    @property
    def rules(self) -> ValidationRules:
        """Rules of the field, empty when none are declared."""
        return self.validation or ValidationRules()

    @property
    def required(self) -> bool:
        return self.rules.required
