"""Tests for result rendering."""

import json
from io import StringIO

from rich.console import Console

from chainval.output import render_json, render_markdown, render_table
from chainval.validation import make, validate_all


def _capture_console():
    return Console(file=StringIO(), width=200, color_system=None)


class TestRenderTable:
    """Test rich table output."""

    def test_failure_table(self):
        result = validate_all([make(1, display_name="ok"), make(-2, display_name="bad").min(0)])
        console = _capture_console()

        render_table(result, console)

        output = console.file.getvalue()
        assert "Validation Status: FAIL" in output
        assert "bad" in output
        assert "expected at least 0" in output

    def test_empty_result(self):
        console = _capture_console()

        render_table(validate_all([]), console)

        output = console.file.getvalue()
        assert "Validation Status: PASS" in output
        assert "No items validated" in output

    def test_single_outcome(self):
        outcome = make("", display_name="title").min(1).validate()
        console = _capture_console()

        render_table(outcome, console, name="title")

        output = console.file.getvalue()
        assert "Validation Status: FAIL" in output
        assert "title: min check failed" in output

    def test_non_string_display_name(self):
        console = _capture_console()

        render_table(validate_all([make(1, display_name=5)]), console)

        assert "5" in console.file.getvalue()


class TestRenderMarkdown:
    """Test markdown output."""

    def test_lists_issues(self):
        result = validate_all([make("x", display_name="code").pattern(r"^\d$")])

        text = render_markdown(result)

        assert text.startswith("# Validation Report")
        assert "**Status:** fail" in text
        assert "- **code** code: pattern check failed" in text

    def test_no_issues(self):
        assert "No issues found." in render_markdown(validate_all([make(1)]))

    def test_single_outcome(self):
        outcome = make(-1, 0, "count").min(0).validate()

        text = render_markdown(outcome, name="count")

        assert "**Status:** fail" in text
        assert "- **count** count: min check failed: expected at least 0, got -1" in text


class TestRenderJson:
    """Test JSON output."""

    def test_unencodable_values_use_repr(self):
        marker = object()
        data = json.loads(render_json(validate_all([make(marker, display_name="obj")])))

        assert data["allValid"] is True
        assert data["results"]["obj"]["value"] == repr(marker)

    def test_single_outcome(self):
        data = json.loads(render_json(make(4).max(5).validate(), name="level"))

        assert data == {
            "allValid": True,
            "results": {"level": {"value": 4, "isValid": True, "errors": []}},
        }
