"""Factory for creating rule validators."""

from typing import Dict, Type

from form_store.models.types import FieldType
from form_store.validators.base import RuleValidator
from form_store.validators.validators import (
    DateValidator,
    MultiSelectValidator,
    NumberValidator,
    SelectValidator,
    SwitchValidator,
    TextareaValidator,
    TextValidator,
)


class ValidatorFactory:
    """Factory for creating rule validators."""

    _validators: Dict[str, Type[RuleValidator]] = {
        FieldType.TEXT.value: TextValidator,
        FieldType.TEXTAREA.value: TextareaValidator,
        FieldType.NUMBER.value: NumberValidator,
        FieldType.DATE.value: DateValidator,
        FieldType.SELECT.value: SelectValidator,
        FieldType.MULTI_SELECT.value: MultiSelectValidator,
        FieldType.SWITCH.value: SwitchValidator,
    }

    @classmethod
    def register_validator(cls, validator_class: Type[RuleValidator]) -> None:
        """Register a validator class, replacing any existing one for its field type.

        Args:
            validator_class: Validator class to register
        """
        cls._validators[validator_class.get_field_type().value] = validator_class

    @classmethod
    def get_validator(cls, field_type: FieldType) -> RuleValidator:
        """Get a validator instance for a field type.

        Args:
            field_type: Field type to get validator for

        Returns:
            Validator instance

        Raises:
            ValueError: If no validator exists for the field type
        """
        validator_class = cls._validators.get(getattr(field_type, "value", None))
        if not validator_class:
            raise ValueError(f"No validator registered for field type: {field_type}")
        return validator_class()


# Convenience function
def get_validator(field_type: FieldType) -> RuleValidator:
    """Get a validator instance for a field type."""
    return ValidatorFactory.get_validator(field_type)
