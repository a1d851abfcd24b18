# tests/test_returning_time.py
import pytest

from app.services.returning_time import parse_returning


def test_compact_four_digit_time():
    info = parse_returning("1145")

    assert info.raw == "1145"
    assert info.hhmm == "11:45"
    assert info.pretty == "11:45"
    assert info.tokens == ("11:45",)


def test_compact_three_digit_time_is_left_padded():
    info = parse_returning("930")

    assert info.hhmm == "09:30"
    assert info.pretty == "9:30"


def test_meridiem_time_keeps_am_pm_in_pretty():
    info = parse_returning("9:30 AM")

    assert info.hhmm == "09:30"
    assert info.pretty == "9:30 AM"
    assert info.tokens == ("AM",)


@pytest.mark.parametrize(
    "raw, hhmm, pretty",
    [
        ("back at 2:15pm", "14:15", "2:15 PM"),
        ("3 PM", "15:00", "3:00 PM"),
        ("12:05 am", "00:05", "12:05 AM"),
        ("12 PM lunch", "12:00", "12:00 PM"),
        ("930am", "09:30", "9:30 AM"),
    ],
)
def test_meridiem_time_found_inside_text(raw, hhmm, pretty):
    info = parse_returning(raw)

    assert info.raw == raw
    assert info.hhmm == hhmm
    assert info.pretty == pretty


def test_free_form_text_yields_tokens():
    info = parse_returning("Thu PM mod")

    assert info.hhmm is None
    assert info.pretty == "Thu PM mod"
    assert info.tokens == ("Thu", "PM", "mod")


def test_free_form_tokens_skip_digits_and_punctuation():
    info = parse_returning("Meeting, Campus #2")

    assert info.hhmm is None
    assert info.tokens == ("Meeting", "Campus")


def test_empty_input_yields_nulls_and_no_tokens():
    info = parse_returning("  ")

    assert info.raw is None
    assert info.hhmm is None
    assert info.pretty is None
    assert info.tokens == ()


def test_non_ascii_digits_are_free_text():
    info = parse_returning("１１４５")

    assert info.hhmm is None
    assert info.pretty == "１１４５"
    assert info.tokens == ()
