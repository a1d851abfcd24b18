# app/services/cell_decoder.py
from __future__ import annotations

import re

from bs4 import Tag

_NBSP_RE = re.compile(r"\u00a0|\u202f|\u2007|&nbsp;|&#160;|&#[xX][aA]0;")
_HSPACE_RE = re.compile(r"[ \t]+")
_BEFORE_NEWLINE_RE = re.compile(r"\s+\n")
_AFTER_NEWLINE_RE = re.compile(r"\n\s+")
_TAG_RE = re.compile(r"<[^>]*>")

TEMPLATE_PLACEHOLDER_RE = re.compile(r"^MM/dd\s+HH:mm$", re.IGNORECASE)
EMPTY_PLACEHOLDERS = ("", "—")


def _decode_once(text: str) -> str:
    text = _NBSP_RE.sub(" ", text)
    text = text.replace("&amp;", "&").replace("&lt;", "<").replace("&gt;", ">")
    text = _HSPACE_RE.sub(" ", text)
    text = _BEFORE_NEWLINE_RE.sub("\n", text)
    text = _AFTER_NEWLINE_RE.sub("\n", text)
    return text.strip()


def decode(text: str | None) -> str:
    """
    Normalize raw cell text.

    Non-breaking spaces become plain spaces, the `&amp;`/`&lt;`/`&gt;`
    entities are unescaped, horizontal whitespace runs collapse to one space,
    whitespace around newlines is dropped and the result is trimmed.

    Every pass either shortens the text or leaves it unchanged, so passes are
    repeated until the text is stable. That makes `decode` idempotent even
    for doubly escaped input such as `&amp;lt;`.
    """
    current = text or ""
    while True:
        cleaned = _decode_once(current)
        if cleaned == current:
            return cleaned
        current = cleaned


def is_template_placeholder(text: str | None) -> bool:
    """
    True when the source rendered its date format string instead of a value.
    """
    return bool(TEMPLATE_PLACEHOLDER_RE.match(text or ""))


def strip_tags(markup: str) -> str:
    return _TAG_RE.sub("", markup)


def extract_cell_text(cell: Tag | None) -> str:
    """
    Return the decoded visible text of a table cell.

    When the visible text is a template placeholder, empty or an em-dash,
    the cell's inner markup is decoded with tags stripped and preferred if it
    yields anything.
    """
    if cell is None:
        return ""

    text = decode(cell.get_text())
    if is_template_placeholder(text) or text in EMPTY_PLACEHOLDERS:
        stripped = decode(strip_tags(cell.decode_contents()))
        return stripped or text
    return text
