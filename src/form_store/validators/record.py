"""Record data validation functions."""

from typing import Dict, List

from form_store.models.record import RecordData
from form_store.models.schema import FormSchema
from form_store.models.types import ValidationMode
from form_store.validators.factory import get_validator
from form_store.values import is_absent, is_blank

REQUIRED_MESSAGE = "Required"
UNKNOWN_FIELD_MESSAGE = "Unknown field"
ALL_ERRORS_SEPARATOR = "; "


def _report(messages: List[str], mode: ValidationMode) -> str:
    if mode == ValidationMode.FIRST:
        return messages[0]
    if mode == ValidationMode.ALL:
        return ALL_ERRORS_SEPARATOR.join(messages)
    return messages[-1]


def validate_record_data(
    data: RecordData,
    schema: FormSchema,
    mode: ValidationMode = ValidationMode.LAST,
    reject_unknown_fields: bool = False,
) -> Dict[str, str]:
    """Validate record data against a form schema.

    Fields are visited in schema order. A required field that is missing, an
    empty string or an empty list reports ``Required`` and is not checked
    further. Other fields are checked against the rules of their type only
    when a value is present. When several rules of one field fail, ``mode``
    decides which message is reported; the default keeps the last one.

    Args:
        data: Submitted values keyed by field id
        schema: Form schema to validate against
        mode: How several failing rules of one field are reported
        reject_unknown_fields: Report keys the schema does not declare

    Returns:
        Mapping from field id to error message, empty if the data is valid
    """
    errors: Dict[str, str] = {}

    for field in schema:
        value = data.get(field.id)
        rules = field.rules

        if rules.required and is_absent(value):
            errors[field.id] = REQUIRED_MESSAGE
            continue

        if is_blank(value):
            continue

        messages = get_validator(field.type).check(value, rules)
        if messages:
            errors[field.id] = _report(messages, mode)

    if reject_unknown_fields:
        known_ids = set(schema.get_field_ids())
        for key in data:
            if key not in known_ids:
                errors[key] = UNKNOWN_FIELD_MESSAGE

    return errors
