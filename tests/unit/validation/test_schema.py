"""Tests for checks on structured subjects."""

import pytest

from chainval.config import MessagesConfig
from chainval.validation import make
from chainval.validation.schema import check_has_keys, check_schema


def is_non_empty_string(value):
    return isinstance(value, str) and value != ""


def is_positive_number(value):
    return isinstance(value, (int, float)) and value > 0


@pytest.fixture
def player_schema():
    return {"id": is_non_empty_string, "level": is_positive_number}


class TestHasKey:
    """Test the has_key rule."""

    def test_present(self):
        assert make({"a": 1}).has_key("a").validate().is_valid is True

    def test_falsy_value_is_present(self):
        assert make({"a": 0}).has_key("a").validate().is_valid is True

    @pytest.mark.parametrize("subject", [{}, {"a": None}])
    def test_absent(self, subject):
        _, is_valid, errors = make(subject, display_name="cfg").has_key("a").validate()

        assert is_valid is False
        assert errors == ["cfg: has_key check failed: missing key 'a'"]

    def test_not_structured(self):
        _, _, errors = make(["a"]).has_key("a").validate()

        assert errors == ["value: has_key check failed: expected a mapping, got list"]


class TestHasKeys:
    """Test the has_keys rule."""

    def test_all_present(self):
        assert make({"a": 1, "b": 2}).has_keys(["a", "b"]).validate().is_valid is True

    def test_names_missing_key(self):
        _, is_valid, errors = make({"a": 1}).has_keys(["a", "b"]).validate()

        assert is_valid is False
        assert len(errors) == 1
        assert "'b'" in errors[0]

    def test_reports_first_missing_only(self):
        _, _, errors = make({}).has_keys(["x", "y"]).validate()

        assert errors == ["value: has_keys check failed: missing key 'x'"]

    def test_empty_keys_is_malformed(self):
        assert check_has_keys({}, [], MessagesConfig()) == ["no keys configured, got []"]


class TestSchema:
    """Test the schema rule."""

    def test_valid(self, player_schema):
        subject = {"id": "abc", "level": 5}

        assert make(subject).schema(player_schema).validate() == (subject, True, [])

    def test_one_failing_key(self, player_schema):
        _, is_valid, errors = make({"id": "", "level": 5}, display_name="player").schema(player_schema).validate()

        assert is_valid is False
        assert errors == ["player: schema check failed: key 'id' rejected value ''"]

    def test_each_failing_key_reported(self, player_schema):
        _, _, errors = make({"id": "", "level": -1}).schema(player_schema).validate()

        assert len(errors) == 2
        assert "'id'" in errors[0]
        assert "'level'" in errors[1]

    def test_missing_key_passes_none_to_predicate(self):
        seen = []

        def record(value):
            seen.append(value)
            return True

        assert make({}).schema({"optional": record}).validate().is_valid is True
        assert seen == [None]

    def test_missing_key_fails_when_predicate_rejects(self, player_schema):
        _, _, errors = make({"id": "abc"}).schema(player_schema).validate()

        assert errors == ["value: schema check failed: key 'level' rejected value None"]

    def test_extra_subject_keys_ignored(self, player_schema):
        subject = {"id": "abc", "level": 2, "extra": object()}

        assert make(subject).schema(player_schema).validate().is_valid is True

    def test_not_structured(self, player_schema):
        _, _, errors = make("abc").schema(player_schema).validate()

        assert errors == ["value: schema check failed: expected a mapping, got str"]

    def test_predicate_exception_is_failure(self):
        _, is_valid, errors = make({"n": "x"}).schema({"n": lambda v: v > 0}).validate()

        assert is_valid is False
        assert "predicate for key 'n' raised TypeError" in errors[0]

    def test_non_callable_predicate(self):
        reasons = check_schema({"n": 1}, {"n": "positive"}, MessagesConfig())

        assert reasons == ["predicate for key 'n' is not callable"]

    def test_non_mapping_schema_is_malformed(self):
        _, _, errors = make({}).schema([is_non_empty_string]).validate()

        assert "schema must be a mapping of key to predicate, got list" in errors[0]

    def test_value_hidden_when_configured(self, player_schema):
        reasons = check_schema({"id": ""}, {"id": is_non_empty_string}, MessagesConfig(include_value=False))

        assert reasons == ["key 'id' rejected its value"]

    def test_schema_after_other_key_rules(self, player_schema):
        checked = make({"id": ""}).schema(player_schema).has_keys(["id", "level"])

        _, _, errors = checked.validate()

        assert errors[0].startswith("value: has_keys check failed")
        assert all("schema check failed" in e for e in errors[1:])
