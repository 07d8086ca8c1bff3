"""Unit tests for LIKE predicate helpers."""

import pytest

from vidshare.services.sql_like import contains_any, contains_pattern, escape_like


class TestEscapeLike:
    def test_plain_text_unchanged(self):
        assert escape_like("quantum") == "quantum"

    def test_escapes_percent_and_underscore(self):
        assert escape_like("100%_done") == "100\\%\\_done"

    def test_escapes_backslash(self):
        assert escape_like("a\\b") == "a\\\\b"


class TestContainsPattern:
    def test_wraps_and_folds(self):
        assert contains_pattern("Tech") == "%tech%"

    def test_folds_beyond_ascii(self):
        assert contains_pattern("STRASSE") == contains_pattern("straße")


class TestContainsAny:
    def test_builds_disjunction_with_one_param_per_field(self):
        sql, params = contains_any(["name", "handle"], "Tech")

        assert sql == (
            "(casefold(name) LIKE ? ESCAPE '\\' OR casefold(handle) LIKE ? ESCAPE '\\')"
        )
        assert params == ["%tech%", "%tech%"]

    def test_single_field_has_no_or(self):
        sql, params = contains_any(["v.title"], "x")

        assert " OR " not in sql
        assert params == ["%x%"]

    def test_requires_fields(self):
        with pytest.raises(ValueError, match="at least one field"):
            contains_any([], "x")
