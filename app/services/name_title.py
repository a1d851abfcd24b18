# app/services/name_title.py
from __future__ import annotations

import re
from typing import NamedTuple

from app.services.cell_decoder import decode

# A dash only separates name and title when whitespace follows it, so
# hyphenated names ("Mary-Jane") stay intact.
_SEPARATOR_RE = re.compile(r"\s*[-–—]\s+")


class NameTitle(NamedTuple):
    name: str | None
    title: str | None


def split_name_title(raw: str | None) -> NameTitle:
    """
    Split a combined "Name - Title" cell.

    Hyphen, en dash and em dash are all accepted as the separator. Extra
    segments are folded back into the title joined with " - ".
    """
    text = decode(raw)
    if not text:
        return NameTitle(None, None)

    parts = _SEPARATOR_RE.split(text)
    if len(parts) < 2:
        return NameTitle(text, None)

    name = parts[0].strip() or None
    title = " - ".join(parts[1:]).strip() or None
    return NameTitle(name, title)
