# app/schemas/board.py
from datetime import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class BoardModel(BaseModel):
    """
    Base for every published board payload.

    Attributes are snake_case in Python and camelCase on the wire. Instances
    are frozen so a published snapshot can be shared with any reader.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )


class Status(str, Enum):
    """
    Presence status of a person on the board.
    """

    IN = "In"
    OUT = "Out"
    UNAVAILABLE = "Unavailable"
    UNKNOWN = "Unknown"


class ContactInfo(BoardModel):
    """
    Best-effort phone normalization of the contact cell.
    """

    raw: str | None = Field(None, description="Decoded cell text, or null when empty.")
    digits: str | None = Field(None, description="Digits only.", examples=["7017777868"])
    e164: str | None = Field(
        None,
        description="International form, only when it can be derived confidently.",
        examples=["+17017777868"],
    )
    pretty: str | None = Field(
        None,
        description="Human readable rendering, falling back to `raw`.",
        examples=["(701) 777-7868"],
    )


class ReturningInfo(BoardModel):
    """
    Parsed "returning" column: a clock time when one is present, otherwise
    the free text and its words.
    """

    raw: str | None = None
    hhmm: str | None = Field(None, description="Zero-padded 24-hour time.", examples=["09:30"])
    pretty: str | None = Field(None, examples=["9:30 AM"])
    tokens: tuple[str, ...] = Field(default=(), examples=[["Thu", "PM", "mod"]])


class UpdatedInfo(BoardModel):
    """
    Parsed "updated" column.

    `local` keeps the exact source string; the other fields are a
    timezone-naive guess interpreted in the host's local time.
    """

    local: str | None = None
    iso_guess: str | None = Field(None, examples=["2025-01-10T10:30:00.000Z"])
    epoch_ms: int | None = Field(None, examples=[1736505000000])
    debug: str | None = Field(
        None,
        description="Diagnostic tag, e.g. 'template placeholder'.",
    )


class StatusFlags(BoardModel):
    is_in: bool = False
    is_out: bool = False
    is_unavailable: bool = False


class RecordMeta(BoardModel):
    """
    Diagnostic data about the source row.
    """

    tr_class: str = Field("", description="Raw class attribute of the source row.")
    row_id_attr: str | None = Field(None, description="Raw id attribute of the source row.")
    parsed_at: datetime = Field(..., description="UTC time at which the row was parsed.")
    flags: StatusFlags = Field(default_factory=StatusFlags)


class BoardRecord(BoardModel):
    """
    One person's current row on the board.
    """

    id: str = Field(..., min_length=1, description="Stable identifier of the row.")
    status: Status = Field(Status.UNKNOWN, examples=["In"])
    name: str | None = Field(None, examples=["Jane Doe"])
    title: str | None = Field(None, examples=["Chief Pilot"])
    contact: ContactInfo = Field(default_factory=ContactInfo)
    remarks: str | None = None
    returning: ReturningInfo = Field(default_factory=ReturningInfo)
    updated: UpdatedInfo = Field(default_factory=UpdatedInfo)
    meta: RecordMeta


class FetchError(BoardModel):
    message: str = Field(..., examples=["Board fetch failed (status=503)"])
    time: datetime


class BoardSnapshot(BoardModel):
    """
    The latest successfully reduced board plus the freshest refresh error.

    `items` and `last_fetched` only ever change together on a successful
    refresh; a failed refresh replaces `error` alone.
    """

    last_fetched: datetime | None = Field(
        None,
        description="UTC time of the last successful refresh.",
    )
    items: tuple[BoardRecord, ...] = Field(default=())
    error: FetchError | None = None


class ServiceSummary(BoardModel):
    """
    Response schema for the service root.
    """

    service: str = Field(..., examples=["are-they-in-api"])
    source: str
    last_fetched: datetime | None = None
    count: int = Field(..., description="Number of records in the current snapshot.")
    error: FetchError | None = None


class RefreshResult(BoardModel):
    """
    Outcome of an on-demand refresh cycle.
    """

    ok: bool = Field(..., description="True when the cycle replaced the board.")
    last_fetched: datetime | None = None
    count: int
    error: FetchError | None = None
