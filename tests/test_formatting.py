from __future__ import annotations

from datetime import date, datetime

import pytest

from resume_builder.rendering.formatting import (
    as_items,
    clean_text,
    format_date,
    format_date_range,
    join_present,
    parse_date,
    text_list,
)


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("2023-01-15", date(2023, 1, 15)),
        ("2023-01-15T09:30:00Z", date(2023, 1, 15)),
        ("2023-01", date(2023, 1, 1)),
        ("01/15/2023", date(2023, 1, 15)),
        ("Jan 2023", date(2023, 1, 1)),
        ("March 2021", date(2021, 3, 1)),
        (datetime(2020, 6, 2, 12, 0), date(2020, 6, 2)),
        (date(2019, 12, 31), date(2019, 12, 31)),
        ("2019", date(2019, 1, 1)),
    ],
)
def test_parse_date_accepts_common_forms(value: object, expected: date) -> None:
    assert parse_date(value) == expected


@pytest.mark.parametrize("value", [None, "", "   ", "not a date", "2023-13-40", 42, ["2023-01-01"]])
def test_parse_date_returns_none_for_unparseable(value: object) -> None:
    assert parse_date(value) is None


def test_format_date_uses_short_month_and_year() -> None:
    assert format_date("2023-01-15") == "Jan 2023"
    assert format_date("2021-09-01") == "Sep 2021"


def test_format_date_is_empty_for_garbage() -> None:
    assert format_date("whenever") == ""
    assert format_date(None) == ""


def test_format_date_range_both_sides() -> None:
    assert format_date_range("2020-01-01", "2022-06-30") == "Jan 2020 - Jun 2022"


def test_format_date_range_current_overrides_end() -> None:
    assert format_date_range("2022-03-01", "2023-01-01", current=True) == "Mar 2022 - Present"
    assert format_date_range("2022-03-01", None, current=True) == "Mar 2022 - Present"


def test_format_date_range_single_side() -> None:
    assert format_date_range("2022-03-01", None) == "Mar 2022"
    assert format_date_range(None, "2022-03-01") == "Mar 2022"
    assert format_date_range(None, None, current=True) == "Present"


def test_format_date_range_never_leaks_placeholders() -> None:
    text = format_date_range("garbage", None)
    assert text == ""
    assert "None" not in format_date_range(None, None)
    assert "Invalid" not in format_date_range("2023-99-99", "x")


def test_format_date_range_custom_separator() -> None:
    assert format_date_range("2020-01-01", "2021-01-01", separator=" to ") == "Jan 2020 to Jan 2021"


def test_clean_text_leaves_escaping_to_templates() -> None:
    assert clean_text("<b>R&D</b>") == "<b>R&D</b>"
    assert clean_text("  padded  ") == "padded"
    assert clean_text(None) == ""
    assert clean_text({"a": 1}) == ""
    assert clean_text(True) == ""
    assert clean_text(7) == "7"


def test_join_present_skips_empty_parts() -> None:
    assert join_present(["a", "", "b", ""], " | ") == "a | b"
    assert join_present(["", ""], " | ") == ""


def test_as_items_and_text_list_filter_malformed_entries() -> None:
    assert as_items("nope") == []
    assert as_items([{"a": 1}, "x", None, {"b": 2}]) == [{"a": 1}, {"b": 2}]
    assert text_list(["Python", "", None, " Go ", 3]) == ["Python", "Go", "3"]
    assert text_list(None) == []


def test_format_date_range_bare_years() -> None:
    assert format_date_range("2019", "2021") == "Jan 2019 - Jan 2021"
