"""Error message formatting for failed rules."""

from typing import Any

from ..config import MessagesConfig
from .kinds import RuleKind

_MAX_REPR = 60


def short_repr(value: Any) -> str:
    """repr() clipped for use inside a message."""
    text = repr(value)
    if len(text) > _MAX_REPR:
        return text[:_MAX_REPR - 3] + "..."
    return text


def describe_set(values: Any) -> str:
    """Render a collection of allowed values in a stable order."""
    try:
        items = sorted(values, key=repr)
    except TypeError:
        items = list(values)
    return "[" + ", ".join(short_repr(v) for v in items) + "]"


def label_for(display_name: str | None, config: MessagesConfig) -> str:
    return str(display_name) if display_name else config.default_label


def format_error(label: str, kind: RuleKind, reason: str) -> str:
    """Build the message recorded for a failed rule.

    >>> format_error("age", RuleKind.MIN, "expected at least 5, got 3")
    'age: min check failed: expected at least 5, got 3'
    """
    return f"{label}: {kind.value} check failed: {reason}"
