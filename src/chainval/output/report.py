"""Render validation results as rich tables, markdown or JSON.

Every renderer takes either an ``AggregateResult`` from ``validate_all()``
or the ``Outcome`` of a single ``validate()`` call, reported under ``name``.
"""

import json
from types import MappingProxyType

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ..validation.aggregate import AggregateResult, ItemResult
from ..validation.framework import Outcome


def _as_aggregate(result: AggregateResult | Outcome, name: str) -> AggregateResult:
    if isinstance(result, Outcome):
        item = ItemResult(result.value, result.is_valid, tuple(result.errors))
        return AggregateResult(MappingProxyType({str(name): item}), result.is_valid)
    return result


def render_table(result: AggregateResult | Outcome, console: Console | None = None,
                 name: str = "value") -> None:
    """Print a status line and a per-item table to the console."""
    result = _as_aggregate(result, name)
    console = console or Console()

    status_color = "green" if result.all_valid else "red"
    status = "PASS" if result.all_valid else "FAIL"
    console.print(f"[{status_color}]Validation Status: {status}[/{status_color}]")

    if not len(result):
        console.print("\n[dim]No items validated[/dim]")
        return

    table = Table()
    table.add_column("Name", style="cyan")
    table.add_column("Status", style="white")
    table.add_column("Value", style="dim")
    table.add_column("Errors", style="white")

    for item_name, item in result.results.items():
        item_color = "green" if item.is_valid else "red"
        table.add_row(
            escape(str(item_name)),
            f"[{item_color}]{'PASS' if item.is_valid else 'FAIL'}[/{item_color}]",
            escape(repr(item.value)),
            escape("\n".join(item.errors)),
        )

    console.print(table)


def render_markdown(result: AggregateResult | Outcome, name: str = "value") -> str:
    """Markdown report of an aggregate or single result."""
    result = _as_aggregate(result, name)
    lines = [
        "# Validation Report",
        f"**Status:** {'pass' if result.all_valid else 'fail'}",
        "",
    ]

    failed = result.failed()
    if failed:
        lines.append("## Issues")
        for item_name, item in failed.items():
            for error in item.errors:
                lines.append(f"- **{item_name}** {error}")
    else:
        lines.append("No issues found.")

    return "\n".join(lines)


def render_json(result: AggregateResult | Outcome, name: str = "value") -> str:
    """JSON report; values that JSON cannot encode are written as their repr."""
    return json.dumps(_as_aggregate(result, name).to_dict(), indent=2, default=repr)
