import logging
from datetime import date

import pytest

from edulinks.core.normalize import LinkInput, normalize_input, normalize_record, parse_tags, resolve_date
from edulinks.core.time import fixed_clock

TODAY = date(2024, 3, 1)
CLOCK = fixed_clock(TODAY)


def test_empty_dates_default_to_today_and_tags_are_absent() -> None:
    record = normalize_record("X", "Y", "", "", "", None, clock=CLOCK)
    assert record.added == TODAY
    assert record.accessed == TODAY
    assert record.tags is None


@pytest.mark.parametrize("raw", ["x", "X", "  x  ", " X\t", "", "   "])
def test_sentinel_and_blank_dates_mean_today(raw: str) -> None:
    assert resolve_date(raw, today=TODAY, field="added") == TODAY


def test_valid_dates_are_parsed() -> None:
    record = normalize_record("X", "Y", "", "2023-12-31", "2024-02-29", None, clock=CLOCK)
    assert record.added == date(2023, 12, 31)
    assert record.accessed == date(2024, 2, 29)


def test_accessed_is_resolved_independently_of_added_sentinel() -> None:
    record = normalize_record("X", "Y", "", "x", "2020-01-02", None, clock=CLOCK)
    assert record.added == TODAY
    assert record.accessed == date(2020, 1, 2)


@pytest.mark.parametrize("raw", ["2023-13-40", "2023-02-30", "2024/03/01", "yesterday", "2024"])
def test_invalid_dates_warn_and_fall_back_to_today(raw: str, caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.WARNING)
    record = normalize_record("X", "Y", "", raw, "", None, clock=CLOCK)
    assert record.added == TODAY
    assert any("added" in message and raw in message for message in caplog.messages)


def test_tags_are_trimmed_deduplicated_and_empty_pieces_dropped() -> None:
    record = normalize_record("X", "Y", "", "", "", "rust, , go,go", clock=CLOCK)
    assert record.tags == {"rust", "go"}


def test_parse_tags_edge_cases() -> None:
    assert parse_tags("") is None
    assert parse_tags(" , ,") is None
    assert parse_tags(None) is None
    assert parse_tags(["a", " a ", "b", ""]) == frozenset({"a", "b"})


def test_text_fields_are_trimmed() -> None:
    record = normalize_input(
        LinkInput(title="  Go Tour ", url=" https://go.dev/tour ", description=" Intro\n"),
        clock=CLOCK,
    )
    assert record.title == "Go Tour"
    assert record.url == "https://go.dev/tour"
    assert record.description == "Intro"
