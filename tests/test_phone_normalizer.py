# tests/test_phone_normalizer.py
from app.schemas.board import ContactInfo
from app.services.phone_normalizer import normalize_phone


def test_ten_digits_are_treated_as_north_american():
    info = normalize_phone("701.777.7868")

    assert info.raw == "701.777.7868"
    assert info.digits == "7017777868"
    assert info.e164 == "+17017777868"
    assert info.pretty == "(701) 777-7868"


def test_seven_digits_are_local():
    info = normalize_phone("777 7868")

    assert info.digits == "7777868"
    assert info.e164 is None
    assert info.pretty == "777-7868"


def test_eleven_or_more_digits_are_assumed_international():
    info = normalize_phone("+44 20 7946 0958")

    assert info.digits == "442079460958"
    assert info.e164 == "+442079460958"
    assert info.pretty == "+44 20 7946 0958"


def test_other_digit_counts_keep_raw_text():
    info = normalize_phone("ext 1234")

    assert info.digits == "1234"
    assert info.e164 is None
    assert info.pretty == "ext 1234"


def test_text_without_digits():
    info = normalize_phone("Cell only")

    assert info == ContactInfo(raw="Cell only", digits=None, e164=None, pretty="Cell only")


def test_empty_input_yields_all_nulls():
    assert normalize_phone("") == ContactInfo()
    assert normalize_phone(None) == ContactInfo()
    assert normalize_phone("&nbsp;") == ContactInfo()


def test_non_ascii_digits_are_not_counted():
    info = normalize_phone("٧٠١ ٧٧٧ ٧٨٦٨")

    assert info.digits is None
    assert info.e164 is None
    assert info.pretty == "٧٠١ ٧٧٧ ٧٨٦٨"


def test_fullwidth_digits_do_not_leak_into_e164():
    info = normalize_phone("701-777-７８６８")

    assert info.digits == "701777"
    assert info.e164 is None
