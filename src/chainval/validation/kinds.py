"""Rule kinds and their fixed evaluation order."""

from enum import Enum


class RuleKind(str, Enum):
    """Kinds of checks that can be attached to a checked value.

    Declaration order is evaluation order.
    """
    TYPE = "type"
    MIN = "min"
    MAX = "max"
    RANGE = "range"
    PATTERN = "pattern"
    ENUM = "enum"
    CUSTOM = "custom"
    INSTANCE_OF = "instance_of"
    HAS_KEY = "has_key"
    HAS_KEYS = "has_keys"
    SCHEMA = "schema"


EVALUATION_ORDER: tuple[RuleKind, ...] = tuple(RuleKind)
