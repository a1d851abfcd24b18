# app/services/row_assembler.py
from __future__ import annotations

import logging
from datetime import datetime, timezone

from bs4 import BeautifulSoup, Tag

from app.schemas.board import BoardRecord, RecordMeta
from app.services.cell_decoder import extract_cell_text
from app.services.name_title import split_name_title
from app.services.phone_normalizer import normalize_phone
from app.services.returning_time import parse_returning
from app.services.status_classifier import StatusClassifier
from app.services.updated_timestamp import parse_updated_cell

logger = logging.getLogger(__name__)

ROW_SELECTOR = "tr[id^='Row'], tr[class*='Item']:has(td.OtlkItem)"
CELL_SELECTOR = "td.OtlkItem"
ROW_ID_PREFIX = "Row"
MIN_CELLS = 7

# Column positions among the data cells of a row.
ID_CELL = 0
STATUS_CELL = 1
NAME_TITLE_CELL = 2
CONTACT_CELL = 3
REMARKS_CELL = 4
RETURNING_CELL = 5
UPDATED_CELL = 6


def _row_class(row: Tag) -> str:
    # bs4 splits multi-valued `class` into a list.
    value = row.get("class") or ""
    if isinstance(value, list):
        value = " ".join(value)
    return value.strip()


def _row_id_attr(row: Tag) -> str | None:
    value = row.get("id")
    return value or None


def data_cells(row: Tag) -> list[Tag]:
    return row.select(CELL_SELECTOR)


def resolve_row_id(row: Tag, cells: list[Tag]) -> str | None:
    """
    Identity of a row: the hidden identity cell, else the row's `id`
    attribute without its "Row" prefix.
    """
    from_cell = extract_cell_text(cells[ID_CELL]) if cells else ""
    if from_cell:
        return from_cell

    attr = _row_id_attr(row) or ""
    if attr.startswith(ROW_ID_PREFIX):
        attr = attr[len(ROW_ID_PREFIX):]
    return attr.strip() or None


class RowAssembler:
    """
    Maps one board row onto a BoardRecord.

    Rows with fewer than seven data cells, or without a resolvable id, are
    rejected (None). Every field parser used here is total, so an accepted
    row never fails on its cell contents.
    """

    @staticmethod
    def assemble(row: Tag, parsed_at: datetime | None = None) -> BoardRecord | None:
        cells = data_cells(row)
        if len(cells) < MIN_CELLS:
            logger.debug("Dropping row %r: %d data cells", _row_id_attr(row), len(cells))
            return None

        record_id = resolve_row_id(row, cells)
        if not record_id:
            logger.debug("Dropping row without identity (class=%r)", _row_class(row))
            return None

        tr_class = _row_class(row)
        status = StatusClassifier.classify(tr_class, extract_cell_text(cells[STATUS_CELL]))
        name, title = split_name_title(extract_cell_text(cells[NAME_TITLE_CELL]))

        return BoardRecord(
            id=record_id,
            status=status,
            name=name,
            title=title,
            contact=normalize_phone(extract_cell_text(cells[CONTACT_CELL])),
            remarks=extract_cell_text(cells[REMARKS_CELL]) or None,
            returning=parse_returning(extract_cell_text(cells[RETURNING_CELL])),
            updated=parse_updated_cell(cells[UPDATED_CELL]),
            meta=RecordMeta(
                tr_class=tr_class,
                row_id_attr=_row_id_attr(row),
                parsed_at=parsed_at or datetime.now(tz=timezone.utc),
                flags=StatusClassifier.flags(status),
            ),
        )


def select_rows(soup: BeautifulSoup) -> list[Tag]:
    """
    Candidate board rows in document order, each row at most once.
    """
    return soup.select(ROW_SELECTOR)


def parse_board(html: str) -> list[BoardRecord]:
    """
    Parse a fetched board page into records, in source order.

    Duplicates are kept; deduplication belongs to the board reducer.
    """
    soup = BeautifulSoup(html, "html.parser")
    parsed_at = datetime.now(tz=timezone.utc)

    records: list[BoardRecord] = []
    for row in select_rows(soup):
        record = RowAssembler.assemble(row, parsed_at=parsed_at)
        if record is not None:
            records.append(record)
    return records
