"""Runtime type tags used by the Type rule.

A subject carries the name of its concrete class plus the category tags
below, so ``type(["number", "string"])`` accepts ints, floats, Decimals
and strings alike.
"""

from collections.abc import Mapping, Sequence, Set
from decimal import Decimal
from numbers import Real
from typing import Any

NONE = "none"
BOOL = "bool"
NUMBER = "number"
STRING = "string"
BYTES = "bytes"
MAPPING = "mapping"
SEQUENCE = "sequence"
SET = "set"
CALLABLE = "callable"
OBJECT = "object"


def is_number(value: Any) -> bool:
    """Real numbers and Decimals, excluding booleans."""
    return isinstance(value, (Real, Decimal)) and not isinstance(value, bool)


def type_tags(value: Any) -> frozenset[str]:
    """Return every tag the value answers to."""
    tags = {type(value).__name__}

    if value is None:
        tags.add(NONE)
    elif isinstance(value, bool):
        tags.add(BOOL)
    elif is_number(value):
        tags.add(NUMBER)
    elif isinstance(value, str):
        tags.add(STRING)
    elif isinstance(value, (bytes, bytearray)):
        tags.add(BYTES)
    elif isinstance(value, Mapping):
        tags.add(MAPPING)
    elif isinstance(value, Sequence):
        tags.add(SEQUENCE)
    elif isinstance(value, Set):
        tags.add(SET)
    elif callable(value):
        tags.add(CALLABLE)
    else:
        tags.add(OBJECT)

    return frozenset(tags)


def measure(value: Any) -> float | int | None:
    """Numeric value of a number, length of a sized value, else None."""
    if is_number(value):
        return value
    if isinstance(value, bool):
        return None
    try:
        return len(value)
    except TypeError:
        return None
