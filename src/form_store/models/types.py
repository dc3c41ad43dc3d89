"""Type definitions for the form store module."""

from enum import Enum


class FieldType(str, Enum):
    """Supported field types for form schema."""

    TEXT = "text"
    NUMBER = "number"
    SELECT = "select"
    MULTI_SELECT = "multi-select"
    DATE = "date"
    TEXTAREA = "textarea"
    SWITCH = "switch"


class ValidationMode(str, Enum):
    """How failing rules of a single field are reported."""

    LAST = "last"  # Last failing rule overwrites earlier ones
    FIRST = "first"  # First failing rule is kept
    ALL = "all"  # Every failing rule, joined


class SortOrder(str, Enum):
    """Sort order options."""

    ASC = "asc"
    DESC = "desc"


# Field types whose descriptors must carry a non-empty option list
OPTION_FIELD_TYPES = {FieldType.SELECT, FieldType.MULTI_SELECT}
