"""Validator-chain engine for chainval.

Attach rules to a value with the chain methods of ``CheckedValue``, run
``validate()`` for a single value or ``validate_all()`` for a batch.
"""

from .aggregate import AggregateResult, ItemResult, validate_all
from .framework import MISSING, CheckedValue, Outcome, make
from .kinds import EVALUATION_ORDER, RuleKind
from .rules import Rule
from .type_tags import type_tags

__all__ = [
    "AggregateResult",
    "CheckedValue",
    "EVALUATION_ORDER",
    "ItemResult",
    "MISSING",
    "Outcome",
    "Rule",
    "RuleKind",
    "make",
    "type_tags",
    "validate_all",
]
