"""Rule evaluation for every kind of check.

Each evaluator takes the subject, the rule's parameters and the message
settings, and returns the reasons the check failed. An empty list means
the check passed. Malformed parameters are reported as failures at
evaluation time; attaching a rule never fails.
"""

import logging
import math
import re
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from ..config import MessagesConfig
from .kinds import RuleKind
from .messages import describe_set, short_repr
from .schema import check_has_key, check_has_keys, check_schema
from .type_tags import is_number, measure, type_tags

logger = logging.getLogger(__name__)

Evaluator = Callable[[Any, Any, MessagesConfig], list[str]]


def _collection(values: Any) -> tuple | None:
    """Normalize a parameter that may be a single string or a collection."""
    if isinstance(values, (str, bytes)):
        return (values,)
    try:
        return tuple(values)
    except TypeError:
        return None


def _got(subject: Any, config: MessagesConfig) -> str:
    if not config.include_value:
        return ""
    return f", got {short_repr(subject)}"


def _got_size(subject: Any, config: MessagesConfig) -> str:
    if not config.include_value or is_number(subject):
        return _got(subject, config)
    return f", got {type(subject).__name__} of length {measure(subject)}"


def _is_bound(value: Any) -> bool:
    """A number usable as a bound; NaN compares false against everything."""
    return is_number(value) and not math.isnan(value)


def _unmeasurable(subject: Any) -> list[str]:
    return [f"{type(subject).__name__} has no numeric value or size"]


def check_type(subject: Any, allowed: Any, config: MessagesConfig) -> list[str]:
    tags = _collection(allowed)
    if not tags:
        return [f"no allowed types configured, got {short_repr(allowed)}"]
    if not all(isinstance(tag, str) for tag in tags):
        return [f"type tags must be strings, got {describe_set(tags)}"]

    if type_tags(subject) & set(tags):
        return []
    return [f"expected one of {describe_set(tags)}, got {type(subject).__name__}"]


def check_min(subject: Any, minimum: Any, config: MessagesConfig) -> list[str]:
    if not _is_bound(minimum):
        return [f"minimum must be a number, got {short_repr(minimum)}"]
    size = measure(subject)
    if size is None:
        return _unmeasurable(subject)
    if not size >= minimum:
        return [f"expected at least {minimum}{_got_size(subject, config)}"]
    return []


def check_max(subject: Any, maximum: Any, config: MessagesConfig) -> list[str]:
    if not _is_bound(maximum):
        return [f"maximum must be a number, got {short_repr(maximum)}"]
    size = measure(subject)
    if size is None:
        return _unmeasurable(subject)
    if not size <= maximum:
        return [f"expected at most {maximum}{_got_size(subject, config)}"]
    return []


def check_range(subject: Any, bounds: Any, config: MessagesConfig) -> list[str]:
    bounds = _collection(bounds)
    if bounds is None or len(bounds) != 2:
        return ["range must be a (minimum, maximum) pair"]

    minimum, maximum = bounds
    if not (_is_bound(minimum) and _is_bound(maximum)):
        return [f"range bounds must be numbers, got {short_repr(minimum)} and {short_repr(maximum)}"]
    if minimum > maximum:
        return [f"minimum {minimum} is greater than maximum {maximum}"]

    size = measure(subject)
    if size is None:
        return _unmeasurable(subject)
    if not minimum <= size <= maximum:
        return [f"expected between {minimum} and {maximum}{_got_size(subject, config)}"]
    return []


def check_pattern(subject: Any, pattern: Any, config: MessagesConfig) -> list[str]:
    if isinstance(pattern, re.Pattern):
        compiled = pattern
    elif isinstance(pattern, str):
        try:
            compiled = re.compile(pattern)
        except re.error as e:
            return [f"invalid pattern {pattern!r}: {e}"]
    else:
        return [f"pattern must be a string, got {type(pattern).__name__}"]

    if not isinstance(subject, str):
        return [f"expected a string matching {compiled.pattern!r}, got {type(subject).__name__}"]
    if compiled.search(subject) is None:
        return [f"does not match pattern {compiled.pattern!r}"]
    return []


def check_enum(subject: Any, allowed: Any, config: MessagesConfig) -> list[str]:
    values = _collection(allowed)
    if values is None:
        return [f"allowed values must be a collection, got {type(allowed).__name__}"]
    if any(subject == value for value in values):
        return []
    return [f"expected one of {describe_set(values)}{_got(subject, config)}"]


def check_custom(subject: Any, predicate: Any, config: MessagesConfig) -> list[str]:
    if not callable(predicate):
        return [f"predicate is not callable: {short_repr(predicate)}"]

    name = getattr(predicate, "__name__", type(predicate).__name__)
    try:
        accepted = predicate(subject)
    except Exception as e:
        logger.debug(f"Custom predicate {name} raised {type(e).__name__}: {e}")
        return [f"predicate {name} raised {type(e).__name__}: {e}"]

    if not accepted:
        return [f"rejected by predicate {name}{_got(subject, config)}"]
    return []


def check_instance_of(subject: Any, cls: Any, config: MessagesConfig) -> list[str]:
    try:
        matched = isinstance(subject, cls)
    except TypeError:
        return [f"not a class reference: {short_repr(cls)}"]

    if matched:
        return []
    classes = cls if isinstance(cls, tuple) else (cls,)
    names = ", ".join(getattr(c, "__name__", repr(c)) for c in classes)
    return [f"expected instance of {names}, got {type(subject).__name__}"]


EVALUATORS: dict[RuleKind, Evaluator] = {
    RuleKind.TYPE: check_type,
    RuleKind.MIN: check_min,
    RuleKind.MAX: check_max,
    RuleKind.RANGE: check_range,
    RuleKind.PATTERN: check_pattern,
    RuleKind.ENUM: check_enum,
    RuleKind.CUSTOM: check_custom,
    RuleKind.INSTANCE_OF: check_instance_of,
    RuleKind.HAS_KEY: check_has_key,
    RuleKind.HAS_KEYS: check_has_keys,
    RuleKind.SCHEMA: check_schema,
}


@dataclass
class Rule:
    """A single configured check attached to a checked value."""
    kind: RuleKind
    parameters: Any = None
    last_error: str | None = None

    def evaluate(self, subject: Any, config: MessagesConfig) -> list[str]:
        """Evaluate against the subject and return the failure reasons.

        Never raises: an unexpected error inside the evaluator is reported
        as a failure of this rule.
        """
        evaluator = EVALUATORS[self.kind]
        try:
            reasons = evaluator(subject, self.parameters, config)
        except Exception as e:
            logger.debug(f"Rule {self.kind.value} failed with error: {e}")
            reasons = [f"check raised {type(e).__name__}: {e}"]

        self.last_error = "; ".join(reasons) if reasons else None
        return reasons
