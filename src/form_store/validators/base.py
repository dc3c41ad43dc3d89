"""Base validator class for field rule evaluation."""

from abc import ABC, abstractmethod
from typing import Any, List

from form_store.models.field import ValidationRules
from form_store.models.types import FieldType


class RuleValidator(ABC):
    """Base class for type-specific rule validators."""

    field_type: FieldType

    @abstractmethod
    def check(self, value: Any, rules: ValidationRules) -> List[str]:
        """Evaluate the rules meaningful for this field type against a present value.

        Args:
            value: Submitted value, known to be neither missing nor an empty string
            rules: Rules declared on the field

        Returns:
            Messages of the failing rules, in evaluation order
        """
        pass

    @classmethod
    def get_field_type(cls) -> FieldType:
        """Get the field type this validator handles."""
        return cls.field_type
