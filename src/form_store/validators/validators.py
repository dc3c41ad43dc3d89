"""Concrete validator implementations for different field types."""

import re
from typing import Any, List

from form_store.models.field import ValidationRules
from form_store.models.types import FieldType
from form_store.validators.base import RuleValidator
from form_store.values import parse_date, stringify, to_number


class TextValidator(RuleValidator):
    """Validator for single-line text fields."""

    field_type = FieldType.TEXT

    def check(self, value: Any, rules: ValidationRules) -> List[str]:
        """Check length bounds and pattern of the stringified value."""
        text = stringify(value)
        errors = []
        if rules.min_length and len(text) < rules.min_length:
            errors.append(f"Min length is {rules.min_length}")
        if rules.max_length and len(text) > rules.max_length:
            errors.append(f"Max length is {rules.max_length}")
        if rules.pattern and not re.search(rules.pattern, text):
            errors.append("Invalid format")
        return errors


class TextareaValidator(TextValidator):
    """Validator for multi-line text fields."""

    field_type = FieldType.TEXTAREA


class NumberValidator(RuleValidator):
    """Validator for number fields."""

    field_type = FieldType.NUMBER

    def check(self, value: Any, rules: ValidationRules) -> List[str]:
        """Check numeric bounds. A value with no numeric reading satisfies both."""
        number = to_number(value)
        if number is None:
            return []
        errors = []
        if rules.min is not None and number < rules.min:
            errors.append(f"Min value is {stringify(rules.min)}")
        if rules.max is not None and number > rules.max:
            errors.append(f"Max value is {stringify(rules.max)}")
        return errors


class DateValidator(RuleValidator):
    """Validator for date fields."""

    field_type = FieldType.DATE

    def check(self, value: Any, rules: ValidationRules) -> List[str]:
        """Reject dates strictly earlier than ``minDate``; the bound itself is accepted."""
        if not rules.min_date:
            return []
        submitted = parse_date(value)
        earliest = parse_date(rules.min_date)
        if submitted is not None and earliest is not None and submitted < earliest:
            return [f"Date must be after {rules.min_date}"]
        return []


class MultiSelectValidator(RuleValidator):
    """Validator for multi-select fields."""

    field_type = FieldType.MULTI_SELECT

    def check(self, value: Any, rules: ValidationRules) -> List[str]:
        """Check the number of chosen options. Non-list values are not counted."""
        if not isinstance(value, (list, tuple)):
            return []
        errors = []
        if rules.min_selected and len(value) < rules.min_selected:
            errors.append(f"Select at least {rules.min_selected}")
        if rules.max_selected and len(value) > rules.max_selected:
            errors.append(f"Select at most {rules.max_selected}")
        return errors


class SelectValidator(RuleValidator):
    """Validator for select fields. Only the presence rule applies."""

    field_type = FieldType.SELECT

    def check(self, value: Any, rules: ValidationRules) -> List[str]:
        return []


class SwitchValidator(RuleValidator):
    """Validator for switch fields. Only the presence rule applies."""

    field_type = FieldType.SWITCH

    def check(self, value: Any, rules: ValidationRules) -> List[str]:
        return []
