# tests/test_status_classifier.py
from app.schemas.board import Status
from app.services.status_classifier import StatusClassifier


def test_row_class_in_marker_wins_over_cell_text():
    assert StatusClassifier.classify("InItem", "Out") == Status.IN
    assert StatusClassifier.classify("InItem", "anything") == Status.IN


def test_row_class_is_matched_case_insensitively_as_substring():
    assert StatusClassifier.classify("row OUTITEM highlighted", "") == Status.OUT
    assert StatusClassifier.classify("UnavailableItem", None) == Status.UNAVAILABLE


def test_falls_back_to_exact_cell_text():
    assert StatusClassifier.classify(None, "Unavailable") == Status.UNAVAILABLE
    assert StatusClassifier.classify("", " in ") == Status.IN
    assert StatusClassifier.classify("", "OUT") == Status.OUT


def test_cell_text_must_match_exactly():
    assert StatusClassifier.classify("", "Inside") == Status.UNKNOWN
    assert StatusClassifier.classify("", "out to lunch") == Status.UNKNOWN


def test_unrecognized_signals_map_to_unknown():
    assert StatusClassifier.classify("FooBar", "???") == Status.UNKNOWN
    assert StatusClassifier.classify(None, None) == Status.UNKNOWN


def test_flags_mirror_status():
    flags = StatusClassifier.flags(Status.OUT)
    assert (flags.is_in, flags.is_out, flags.is_unavailable) == (False, True, False)

    unknown = StatusClassifier.flags(Status.UNKNOWN)
    assert not (unknown.is_in or unknown.is_out or unknown.is_unavailable)
