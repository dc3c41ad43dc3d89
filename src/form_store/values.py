"""Helpers over the closed set of values a record payload may hold.

Record data is an open mapping, but every value falls into one of a fixed set
of variants. Search, sorting and rule evaluation all go through the functions
in this module so that each of them is a total function over those variants:

- missing: ``None`` (and float NaN, which has no place in an ordering)
- boolean: ``True`` / ``False`` as posted by switch fields
- number: ``int`` / ``float``
- string: text, textarea, select and ISO date values
- list: multi-select values
- other: anything else a client may send (mappings, nested structures)
"""

import json
import math
from datetime import date, datetime
from enum import IntEnum
from typing import Any, Optional, Tuple


class ValueKind(IntEnum):
    """Variant of a record value. The integer value is its rank in sort order."""

    BOOLEAN = 0
    NUMBER = 1
    STRING = 2
    LIST = 3
    OTHER = 4
    MISSING = 5


def kind_of(value: Any) -> ValueKind:
    """Classify a value into its variant."""
    if value is None:
        return ValueKind.MISSING
    if isinstance(value, bool):
        return ValueKind.BOOLEAN
    if isinstance(value, (int, float)):
        if isinstance(value, float) and math.isnan(value):
            return ValueKind.MISSING
        return ValueKind.NUMBER
    if isinstance(value, str):
        return ValueKind.STRING
    if isinstance(value, (list, tuple)):
        return ValueKind.LIST
    return ValueKind.OTHER


def is_blank(value: Any) -> bool:
    """Check whether a value counts as not provided for rule evaluation."""
    return value is None or value == ""


def is_absent(value: Any) -> bool:
    """Check whether a value fails the presence rule of a required field."""
    if is_blank(value):
        return True
    return isinstance(value, (list, tuple)) and len(value) == 0


def stringify(value: Any) -> str:
    """Render a value as text, the way it is displayed and searched.

    Booleans render lowercase, integral floats drop their fraction and lists
    are joined with commas.
    """
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        if math.isnan(value):
            return "NaN"
        if math.isinf(value):
            return "Infinity" if value > 0 else "-Infinity"
        if value.is_integer():
            return str(int(value))
        return repr(value)
    if isinstance(value, str):
        return value
    if isinstance(value, (list, tuple)):
        return ",".join("" if item is None else stringify(item) for item in value)
    if isinstance(value, (date, datetime)):
        return value.isoformat()
    if isinstance(value, dict):
        return json.dumps(value, separators=(",", ":"), default=str)
    return str(value)


def to_number(value: Any) -> Optional[float]:
    """Coerce a value to a number.

    Returns:
        The numeric value, or None when the value has no numeric reading
    """
    if isinstance(value, bool):
        return float(value)
    if isinstance(value, int):
        try:
            return float(value)
        except OverflowError:
            return math.inf if value > 0 else -math.inf
    if isinstance(value, float):
        number = value
    elif isinstance(value, str):
        text = value.strip()
        if not text:
            return 0.0
        if "_" in text:
            return None
        try:
            number = float(text)
        except ValueError:
            return None
        # Only the spelled-out forms name an infinity; "inf" and "nan" are text
        if not math.isfinite(number) and any(word in text.lower() for word in ("inf", "nan")):
            if text.lstrip("+-") != "Infinity":
                return None
    else:
        return None
    return None if math.isnan(number) else number


def parse_date(value: Any) -> Optional[date]:
    """Parse a value as a calendar date.

    Accepts:
    - date and datetime objects
    - strings in YYYY-MM-DD format
    - ISO-8601 datetime strings, including a trailing ``Z``

    Returns:
        The calendar date, or None if the value cannot be parsed
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        return None
    text = value.strip()
    try:
        return datetime.strptime(text, "%Y-%m-%d").date()
    except ValueError:
        pass
    try:
        return datetime.fromisoformat(text.replace("Z", "+00:00")).date()
    except ValueError:
        return None


def sort_key(value: Any) -> Tuple[int, Any]:
    """Build a key giving a total order over present values.

    Values of different variants order by variant rank (booleans, numbers,
    strings, lists, other). Within a variant the natural order applies; lists
    compare item by item on their text form. ISO timestamps are strings and
    order chronologically.

    Raises:
        ValueError: If the value is missing; callers place missing values themselves
    """
    kind = kind_of(value)
    if kind is ValueKind.MISSING:
        raise ValueError("Missing values have no sort key")
    if kind is ValueKind.BOOLEAN:
        return kind.value, int(value)
    if kind in (ValueKind.NUMBER, ValueKind.STRING):
        return kind.value, value
    if kind is ValueKind.LIST:
        return kind.value, tuple("" if item is None else stringify(item) for item in value)
    return kind.value, stringify(value)
