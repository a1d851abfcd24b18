# app/services/returning_time.py
from __future__ import annotations

import re

from app.schemas.board import ReturningInfo
from app.services.cell_decoder import decode

_COMPACT_TIME_RE = re.compile(r"^\d{3,4}$", re.ASCII)
_MERIDIEM_TIME_RE = re.compile(r"\b(\d{1,2}):?(\d{2})?\s*(AM|PM)\b", re.IGNORECASE | re.ASCII)
_WORD_RE = re.compile(r"[A-Za-z]+")


def _to_24_hour(hour: int, meridiem: str) -> int:
    # "14:00 PM" is already 24-hour
    if hour > 12:
        return hour
    if meridiem == "AM":
        return 0 if hour == 12 else hour
    return hour if hour == 12 else hour + 12


def parse_returning(raw: str | None) -> ReturningInfo:
    """
    Parse the free-form "returning" column.

    Attempts, in order:
    1) compact clock digits ("1145", "930")  -> "11:45", "09:30"
    2) a meridiem time anywhere ("9:30 AM", "back 2pm")
    3) free text ("Thu PM mod"): no time, alphabetic words as tokens
    """
    text = decode(raw)
    if not text:
        return ReturningInfo()

    if _COMPACT_TIME_RE.match(text):
        padded = text.zfill(4)
        hh, mm = padded[:2], padded[2:]
        pretty = f"{int(hh)}:{mm}"
        return ReturningInfo(raw=text, hhmm=f"{hh}:{mm}", pretty=pretty, tokens=(pretty,))

    match = _MERIDIEM_TIME_RE.search(text)
    if match:
        hour = int(match.group(1))
        minutes = match.group(2) or "00"
        meridiem = match.group(3).upper()
        return ReturningInfo(
            raw=text,
            hhmm=f"{_to_24_hour(hour, meridiem):02d}:{minutes}",
            pretty=f"{hour}:{minutes} {meridiem}",
            tokens=(meridiem,),
        )

    return ReturningInfo(
        raw=text,
        hhmm=None,
        pretty=text,
        tokens=tuple(_WORD_RE.findall(text)),
    )
