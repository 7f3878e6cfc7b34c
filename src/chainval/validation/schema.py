"""Checks on structured (key/value) subjects: HasKey, HasKeys and Schema.

Absent keys and keys mapped to ``None`` are treated alike. A schema key that
the subject does not carry hands ``None`` to its predicate, which decides
whether that is acceptable.
"""

import logging
from collections.abc import Mapping
from typing import Any

from ..config import MessagesConfig
from .messages import short_repr

logger = logging.getLogger(__name__)


def _not_a_mapping(subject: Any) -> list[str]:
    return [f"expected a mapping, got {type(subject).__name__}"]


def _key_names(keys: Any) -> tuple | None:
    if isinstance(keys, (str, bytes)):
        return (keys,)
    try:
        return tuple(keys)
    except TypeError:
        return None


def check_has_key(subject: Any, key: Any, config: MessagesConfig) -> list[str]:
    if not isinstance(subject, Mapping):
        return _not_a_mapping(subject)
    if subject.get(key) is None:
        return [f"missing key {key!r}"]
    return []


def check_has_keys(subject: Any, keys: Any, config: MessagesConfig) -> list[str]:
    names = _key_names(keys)
    if not names:
        return [f"no keys configured, got {short_repr(keys)}"]
    if not isinstance(subject, Mapping):
        return _not_a_mapping(subject)

    # Only the first missing key is reported
    for key in names:
        if subject.get(key) is None:
            return [f"missing key {key!r}"]
    return []


def check_schema(subject: Any, schema: Any, config: MessagesConfig) -> list[str]:
    """Run each per-key predicate against the subject's value for that key.

    Every failing key yields its own reason, in schema order.
    """
    if not isinstance(schema, Mapping):
        return [f"schema must be a mapping of key to predicate, got {type(schema).__name__}"]
    if not isinstance(subject, Mapping):
        return _not_a_mapping(subject)

    reasons = []
    for key, predicate in schema.items():
        if not callable(predicate):
            reasons.append(f"predicate for key {key!r} is not callable")
            continue

        value = subject.get(key)
        try:
            accepted = predicate(value)
        except Exception as e:
            logger.debug(f"Schema predicate for key {key!r} raised {type(e).__name__}: {e}")
            reasons.append(f"predicate for key {key!r} raised {type(e).__name__}: {e}")
            continue

        if not accepted:
            if config.include_value:
                reasons.append(f"key {key!r} rejected value {short_repr(value)}")
            else:
                reasons.append(f"key {key!r} rejected its value")

    return reasons
