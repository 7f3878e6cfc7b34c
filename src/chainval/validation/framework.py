"""Checked values: a subject plus the chain of rules attached to it.

Rules are keyed by kind, so attaching a kind twice keeps only the latest
configuration. ``validate()`` evaluates every attached rule in the fixed
kind order and never raises; failures surface through the returned errors.
"""

import logging
from collections.abc import Iterator
from typing import Any, NamedTuple

from ..config import ChainvalConfig
from .kinds import EVALUATION_ORDER, RuleKind
from .messages import format_error, label_for
from .rules import Rule

logger = logging.getLogger(__name__)


class _Missing:
    """Marker for a fallback that was never supplied."""

    def __repr__(self) -> str:
        return "MISSING"


MISSING: Any = _Missing()


class Outcome(NamedTuple):
    """Result of one validate() call."""
    value: Any
    is_valid: bool
    errors: list[str]


class CheckedValue:
    """A value under validation with its fallback, display name and rules."""

    def __init__(self, subject: Any, fallback: Any = MISSING,
                 display_name: str | None = None, config: ChainvalConfig | None = None):
        self.subject = subject
        self.fallback = fallback
        self.display_name = display_name
        self.config = config or ChainvalConfig()
        self.rules: dict[RuleKind, Rule] = {}
        self.last_errors: list[str] = []

    def __repr__(self) -> str:
        kinds = ", ".join(kind.value for kind in self.rules)
        return f"CheckedValue({self.subject!r}, name={self.display_name!r}, rules=[{kinds}])"

    @property
    def has_fallback(self) -> bool:
        return self.fallback is not MISSING

    @property
    def label(self) -> str:
        """Name used in error messages."""
        return label_for(self.display_name, self.config.messages)

    def _attach(self, kind: RuleKind, parameters: Any) -> "CheckedValue":
        if kind in self.rules:
            logger.debug(f"Replacing {kind.value} rule on {self.label}")
            del self.rules[kind]
        if isinstance(parameters, Iterator):
            # Iterators are stored as tuples so repeated validate() calls see the same values
            parameters = tuple(parameters)
        self.rules[kind] = Rule(kind, parameters)
        return self

    def type(self, allowed: Any) -> "CheckedValue":
        """Require one of the given type tags (see ``type_tags``)."""
        return self._attach(RuleKind.TYPE, allowed)

    def min(self, minimum: Any) -> "CheckedValue":
        return self._attach(RuleKind.MIN, minimum)

    def max(self, maximum: Any) -> "CheckedValue":
        return self._attach(RuleKind.MAX, maximum)

    def range(self, minimum: Any, maximum: Any) -> "CheckedValue":
        return self._attach(RuleKind.RANGE, (minimum, maximum))

    def pattern(self, pattern: Any) -> "CheckedValue":
        """Require a string subject that the regular expression searches successfully."""
        return self._attach(RuleKind.PATTERN, pattern)

    def enum(self, values: Any) -> "CheckedValue":
        return self._attach(RuleKind.ENUM, values)

    def custom(self, predicate: Any) -> "CheckedValue":
        return self._attach(RuleKind.CUSTOM, predicate)

    def instance_of(self, cls: Any) -> "CheckedValue":
        return self._attach(RuleKind.INSTANCE_OF, cls)

    def has_key(self, key: Any) -> "CheckedValue":
        return self._attach(RuleKind.HAS_KEY, key)

    def has_keys(self, keys: Any) -> "CheckedValue":
        return self._attach(RuleKind.HAS_KEYS, keys)

    def schema(self, mapping: Any) -> "CheckedValue":
        """Validate a mapping subject with one predicate per key."""
        return self._attach(RuleKind.SCHEMA, mapping)

    def validate(self) -> Outcome:
        """Evaluate every attached rule.

        Returns:
            Outcome of (value, is_valid, errors). The value is the subject
            unless validation failed and a fallback was supplied.
        """
        label = self.label
        errors: list[str] = []

        for kind in EVALUATION_ORDER:
            rule = self.rules.get(kind)
            if rule is None:
                continue
            reasons = rule.evaluate(self.subject, self.config.messages)
            logger.debug(f"Rule {kind.value} on {label}: {'fail' if reasons else 'pass'}")
            errors.extend(format_error(label, kind, reason) for reason in reasons)

        self.last_errors = errors
        is_valid = not errors
        value = self.fallback if not is_valid and self.has_fallback else self.subject
        return Outcome(value, is_valid, list(errors))

    def get_errors(self) -> list[str]:
        """Errors recorded by the most recent validate() call."""
        return list(self.last_errors)


def make(subject: Any, fallback: Any = MISSING, display_name: str | None = None,
         *, config: ChainvalConfig | None = None) -> CheckedValue:
    """Create a checked value ready for chaining."""
    return CheckedValue(subject, fallback, display_name, config)
