# app/services/snapshot_cache.py
from __future__ import annotations

from datetime import datetime, timezone
from typing import Iterable

from app.schemas.board import BoardRecord, BoardSnapshot, FetchError


class SnapshotCache:
    """
    Owner of the single published BoardSnapshot.

    Snapshots are frozen and every change installs a new one with a single
    assignment, so readers always get a complete snapshot:
    - `replace` installs a freshly reduced board and clears the error.
    - `record_error` keeps items/last_fetched and only swaps the error.
    """

    def __init__(self, initial: BoardSnapshot | None = None) -> None:
        self._snapshot = initial or BoardSnapshot()

    @property
    def snapshot(self) -> BoardSnapshot:
        return self._snapshot

    def replace(
        self,
        items: Iterable[BoardRecord],
        fetched_at: datetime | None = None,
    ) -> BoardSnapshot:
        snapshot = BoardSnapshot(
            last_fetched=fetched_at or datetime.now(tz=timezone.utc),
            items=tuple(items),
            error=None,
        )
        self._snapshot = snapshot
        return snapshot

    def record_error(self, message: str, at: datetime | None = None) -> BoardSnapshot:
        error = FetchError(
            message=message or "Unknown error",
            time=at or datetime.now(tz=timezone.utc),
        )
        snapshot = self._snapshot.model_copy(update={"error": error})
        self._snapshot = snapshot
        return snapshot
