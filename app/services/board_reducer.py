# app/services/board_reducer.py
from __future__ import annotations

import unicodedata
from typing import Iterable

from app.schemas.board import BoardRecord, Status

STATUS_PRIORITY: dict[Status, int] = {
    Status.IN: 0,
    Status.OUT: 1,
    Status.UNAVAILABLE: 2,
    Status.UNKNOWN: 3,
}


def name_collation_key(name: str | None) -> tuple[str, str]:
    """
    Locale-style ordering for names: accents and case are ignored first,
    then the raw text breaks ties so the order stays total.
    """
    text = name or ""
    folded = unicodedata.normalize("NFKD", text)
    folded = "".join(ch for ch in folded if not unicodedata.combining(ch)).casefold()
    return folded, text


def sort_key(record: BoardRecord) -> tuple[int, tuple[str, str]]:
    return STATUS_PRIORITY[record.status], name_collation_key(record.name)


def reduce_board(records: Iterable[BoardRecord]) -> list[BoardRecord]:
    """
    Deduplicate by id and order the board.

    Rules
    -----
    - For repeated ids the last record in source order wins.
    - Ordering: In < Out < Unavailable < Unknown, then name ascending
      (missing names sort as "").
    - Full ties keep the order in which each id first appeared.
    """
    by_id: dict[str, BoardRecord] = {}
    for record in records:
        by_id[record.id] = record

    return sorted(by_id.values(), key=sort_key)
