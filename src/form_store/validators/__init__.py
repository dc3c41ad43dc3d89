"""Rule validation system for form store."""

from form_store.validators.base import RuleValidator
from form_store.validators.factory import ValidatorFactory, get_validator
from form_store.validators.record import validate_record_data
from form_store.validators.validators import (
    DateValidator,
    MultiSelectValidator,
    NumberValidator,
    SelectValidator,
    SwitchValidator,
    TextareaValidator,
    TextValidator,
)

__all__ = [
    "RuleValidator",
    "ValidatorFactory",
    "get_validator",
    "DateValidator",
    "MultiSelectValidator",
    "NumberValidator",
    "SelectValidator",
    "SwitchValidator",
    "TextareaValidator",
    "TextValidator",
    "validate_record_data",
]
