# app/services/status_classifier.py
from __future__ import annotations

from app.schemas.board import Status, StatusFlags
from app.services.cell_decoder import decode


class StatusClassifier:
    """
    Derives a row's Status from its class attribute and its status cell.

    Rules
    -----
    1) Row class contains "initem"       => In
    2) Row class contains "outitem"      => Out
    3) Row class contains "unavailable"  => Unavailable
    4) Cell text is exactly in/out/unavailable (case-insensitive)
    5) Otherwise                         => Unknown

    The row class is checked first because it does not drift with free text.
    """

    CLASS_MARKERS: tuple[tuple[str, Status], ...] = (
        ("initem", Status.IN),
        ("outitem", Status.OUT),
        ("unavailable", Status.UNAVAILABLE),
    )

    TEXT_VALUES: dict[str, Status] = {
        "in": Status.IN,
        "out": Status.OUT,
        "unavailable": Status.UNAVAILABLE,
    }

    @classmethod
    def classify(cls, row_class: str | None, cell_text: str | None) -> Status:
        lowered_class = (row_class or "").lower()
        for marker, status in cls.CLASS_MARKERS:
            if marker in lowered_class:
                return status

        return cls.TEXT_VALUES.get(decode(cell_text).lower(), Status.UNKNOWN)

    @staticmethod
    def flags(status: Status) -> StatusFlags:
        return StatusFlags(
            is_in=status is Status.IN,
            is_out=status is Status.OUT,
            is_unavailable=status is Status.UNAVAILABLE,
        )
