"""Tests for date index loading."""

from __future__ import annotations

import pytest

from src.parsers.date_index import DateIndexError, load_date_index, parse_date_index


def test_unquoted_dates_become_iso_strings():
    index = parse_date_index("2024-01-05: first\n2024-01-03: zeroth\n")

    assert index == {"2024-01-03": "zeroth", "2024-01-05": "first"}
    assert list(index) == ["2024-01-03", "2024-01-05"]


def test_quoted_dates_and_non_string_values():
    index = parse_date_index("'2024-02-01': 42\n\"2024-01-31\": comic\n")

    assert index == {"2024-01-31": "comic", "2024-02-01": "42"}


def test_empty_document_is_empty_index():
    assert parse_date_index("") == {}
    assert parse_date_index("# only a comment\n") == {}


def test_non_mapping_is_rejected():
    with pytest.raises(DateIndexError, match="mapping"):
        _ = parse_date_index("- 2024-01-01\n- 2024-01-02\n")


def test_invalid_yaml_is_rejected():
    with pytest.raises(DateIndexError, match="Invalid YAML"):
        _ = parse_date_index("2024-01-01: [unclosed\n")


def test_missing_folder_name_is_rejected():
    with pytest.raises(DateIndexError, match="no comic folder"):
        _ = parse_date_index("2024-01-01:\n")


def test_load_missing_file(tmp_path):
    with pytest.raises(DateIndexError, match="Could not read"):
        _ = load_date_index(tmp_path / "missing.yaml")


def test_load_from_file(tmp_path):
    dates_file = tmp_path / "dates.yaml"
    _ = dates_file.write_text("2024-03-01: march\n", encoding="utf-8")

    assert load_date_index(dates_file) == {"2024-03-01": "march"}


def test_duplicate_dates_after_normalization_are_rejected():
    with pytest.raises(DateIndexError, match="more than once"):
        _ = parse_date_index("2024-01-05: first\n'2024-01-05': second\n")
