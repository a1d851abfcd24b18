# app/services/updated_timestamp.py
from __future__ import annotations

from datetime import datetime, timezone

from bs4 import Tag
from dateutil import parser as date_parser

from app.schemas.board import UpdatedInfo
from app.services.cell_decoder import decode, extract_cell_text, is_template_placeholder

TEMPLATE_PLACEHOLDER_DEBUG = "template placeholder"


def _guess_instant(text: str) -> tuple[str, int] | None:
    """
    Best-effort calendar parse of a board timestamp such as "10/17 14:32".

    Missing fields come from today's local date; naive results are taken
    as host-local time. Returns the UTC ISO string and epoch milliseconds,
    or None when the text is not a date or falls outside the calendar once
    converted to UTC.
    """
    today = datetime.now().replace(hour=0, minute=0, second=0, microsecond=0)
    try:
        parsed = date_parser.parse(text, default=today)
        if parsed.tzinfo is None:
            parsed = parsed.astimezone()
        utc = parsed.astimezone(timezone.utc)
        iso = utc.isoformat(timespec="milliseconds").replace("+00:00", "Z")
        epoch_ms = int(round(parsed.timestamp() * 1000))
    except (ValueError, OverflowError, OSError):
        return None
    return iso, epoch_ms


def parse_updated(text: str | None) -> UpdatedInfo:
    """
    Parse the "updated" column.

    A rendered template placeholder (e.g. "MM/dd HH:mm") is reported through
    `debug` with every other field null. Otherwise the decoded text is kept
    verbatim in `local` and `iso_guess`/`epoch_ms` hold the parsed instant,
    or stay null when the text cannot be read as a date.
    """
    local = decode(text)
    if is_template_placeholder(local):
        return UpdatedInfo(debug=TEMPLATE_PLACEHOLDER_DEBUG)

    if not local:
        return UpdatedInfo()

    guess = _guess_instant(local)
    if guess is None:
        return UpdatedInfo(local=local)

    iso_guess, epoch_ms = guess
    return UpdatedInfo(local=local, iso_guess=iso_guess, epoch_ms=epoch_ms)


def parse_updated_cell(cell: Tag | None) -> UpdatedInfo:
    return parse_updated(extract_cell_text(cell))
