"""Batch validation of many checked values into one keyed report."""

import logging
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any

from ..config import ChainvalConfig
from .framework import CheckedValue

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ItemResult:
    """Outcome recorded for one checked value."""
    value: Any
    is_valid: bool
    errors: tuple[str, ...] = ()

    def to_dict(self) -> dict:
        return {
            "value": self.value,
            "isValid": self.is_valid,
            "errors": list(self.errors),
        }


@dataclass(frozen=True)
class AggregateResult:
    """Results keyed by name plus the overall verdict.

    Unpacks as ``results, all_valid``.
    """
    results: Mapping[str, ItemResult]
    all_valid: bool

    def __iter__(self) -> Iterator[Any]:
        yield self.results
        yield self.all_valid

    def __getitem__(self, name: str) -> ItemResult:
        return self.results[name]

    def __len__(self) -> int:
        return len(self.results)

    def failed(self) -> dict[str, ItemResult]:
        """Only the items that did not validate."""
        return {name: item for name, item in self.results.items() if not item.is_valid}

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON output."""
        return {
            "allValid": self.all_valid,
            "results": {name: item.to_dict() for name, item in self.results.items()},
        }


def _entries(items: Any) -> list[tuple[str, Any]]:
    """Pair each element with its positional key."""
    if isinstance(items, CheckedValue):
        raise TypeError("validate_all expects a collection of CheckedValue, got a single CheckedValue")
    if isinstance(items, Mapping):
        return [(str(key), item) for key, item in items.items()]
    if isinstance(items, (str, bytes)) or not isinstance(items, Iterable):
        raise TypeError(f"validate_all expects a collection of CheckedValue, got {type(items).__name__}")
    return [(str(index), item) for index, item in enumerate(items)]


def _unique(candidate: str, taken: set[str], marker: str) -> str:
    while candidate in taken:
        candidate = marker + candidate
    return candidate


def _assign_names(entries: list[tuple[str, CheckedValue]], marker: str) -> list[str]:
    """Resolve the result key for every entry.

    Explicit display names are reserved first so positional keys can never
    shadow them; repeated display names get the marker and their position.
    """
    display_names = [str(item.display_name) if item.display_name else None for _, item in entries]
    taken = {name for name in display_names if name}
    claimed: set[str] = set()
    names: list[str | None] = []

    for (position, _), name in zip(entries, display_names):
        if not name:
            names.append(None)
        elif name not in claimed:
            claimed.add(name)
            names.append(name)
        else:
            disambiguated = _unique(f"{name}{marker}{position}", taken, marker)
            taken.add(disambiguated)
            names.append(disambiguated)

    for index, (position, _) in enumerate(entries):
        if names[index] is None:
            positional = _unique(position, taken, marker)
            taken.add(positional)
            names[index] = positional

    return names


def validate_all(items: Iterable[CheckedValue] | Mapping[Any, CheckedValue],
                 config: ChainvalConfig | None = None) -> AggregateResult:
    """Validate every checked value and merge the outcomes.

    Args:
        items: Sequence or mapping of CheckedValue instances
        config: Settings for result naming (default: built-in defaults)

    Returns:
        AggregateResult with per-item results and the overall verdict

    Raises:
        TypeError: If any element is not a CheckedValue. Raised before any
            element is validated.
    """
    config = config or ChainvalConfig()
    entries = _entries(items)

    for position, item in entries:
        if not isinstance(item, CheckedValue):
            raise TypeError(f"Item {position!r} is not a CheckedValue: {type(item).__name__}")

    names = _assign_names(entries, config.aggregate.positional_marker)
    logger.info(f"Validating {len(entries)} checked values")

    results: dict[str, ItemResult] = {}
    for name, (_, item) in zip(names, entries):
        value, is_valid, errors = item.validate()
        results[name] = ItemResult(value, is_valid, tuple(errors))

    all_valid = all(item.is_valid for item in results.values())
    failures = sum(1 for item in results.values() if not item.is_valid)
    logger.info(f"Validation completed: {failures} of {len(results)} items failed")

    return AggregateResult(MappingProxyType(results), all_valid)
