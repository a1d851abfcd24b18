# app/services/phone_normalizer.py
from __future__ import annotations

import re

from app.schemas.board import ContactInfo
from app.services.cell_decoder import decode

_NON_DIGIT_RE = re.compile(r"\D+", re.ASCII)


def normalize_phone(raw: str | None) -> ContactInfo:
    """
    Best-effort phone normalization keyed on the digit count.

    - 10 digits  -> North American number: +1 E.164, "(AAA) BBB-CCCC"
    - 7 digits   -> local number: "AAA-BBBB", no E.164
    - 11+ digits -> assumed international: "+<digits>", pretty = raw
    - otherwise  -> no E.164, pretty = raw

    This is not phone validation and never raises.
    """
    text = decode(raw)
    if not text:
        return ContactInfo()

    digits = _NON_DIGIT_RE.sub("", text)
    if not digits:
        return ContactInfo(raw=text, pretty=text)

    if len(digits) == 10:
        return ContactInfo(
            raw=text,
            digits=digits,
            e164=f"+1{digits}",
            pretty=f"({digits[:3]}) {digits[3:6]}-{digits[6:]}",
        )

    if len(digits) == 7:
        return ContactInfo(
            raw=text,
            digits=digits,
            pretty=f"{digits[:3]}-{digits[3:]}",
        )

    e164 = f"+{digits}" if len(digits) >= 11 else None
    return ContactInfo(raw=text, digits=digits, e164=e164, pretty=text)
