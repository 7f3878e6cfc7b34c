"""chainval - chainable value validation with fallbacks and batch reports.

Attach named checks to a value, evaluate them in a fixed order, and get back
either the value or a configured fallback along with readable diagnostics.
"""

__version__ = "0.1.0"
__description__ = "Chainable value validation with fallbacks and batch reports"

from chainval.config import ChainvalConfig, load_config
from chainval.validation import (
    AggregateResult,
    CheckedValue,
    ItemResult,
    RuleKind,
    make,
    validate_all,
)

__all__ = [
    "__version__",
    "__description__",
    "AggregateResult",
    "ChainvalConfig",
    "CheckedValue",
    "ItemResult",
    "RuleKind",
    "load_config",
    "make",
    "validate_all",
]
