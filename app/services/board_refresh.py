# app/services/board_refresh.py
from __future__ import annotations

import asyncio
import contextlib
import logging

from bs4 import BeautifulSoup

from app.schemas.board import BoardSnapshot
from app.services.board_client import BoardClient, BoardClientError
from app.services.board_reducer import reduce_board
from app.services.row_assembler import CELL_SELECTOR, UPDATED_CELL, parse_board, select_rows
from app.services.snapshot_cache import SnapshotCache

logger = logging.getLogger(__name__)

SAMPLE_ROWS = 3


def _log_updated_samples(html: str) -> None:
    soup = BeautifulSoup(html, "html.parser")
    for row in select_rows(soup)[:SAMPLE_ROWS]:
        cells = row.select(CELL_SELECTOR)
        if len(cells) <= UPDATED_CELL:
            continue
        cell = cells[UPDATED_CELL]
        logger.info("Updated cell raw html: %r", cell.decode_contents())
        logger.info("Updated cell text:     %r", cell.get_text())


async def refresh_board(
    cache: SnapshotCache,
    client: BoardClient,
    *,
    log_sample: bool = False,
) -> BoardSnapshot:
    """
    Run one refresh cycle: fetch, parse, reduce, publish.

    Behavior
    --------
    - On success the cache gets a new snapshot (items, last_fetched, no error).
    - On any failure only the cache error is replaced; the previous items and
      last_fetched stay published.
    - Nothing is raised to the caller, so the poller survives any outage.
    """
    try:
        html = await client.fetch_page()
        if log_sample:
            _log_updated_samples(html)
        items = reduce_board(parse_board(html))
    except BoardClientError as exc:
        logger.error("Board fetch error: %s", exc)
        return cache.record_error(str(exc))
    except Exception as exc:
        logger.exception("Board refresh failed")
        return cache.record_error(str(exc) or exc.__class__.__name__)

    snapshot = cache.replace(items)
    logger.info("Board refreshed at %s: %d rows", snapshot.last_fetched.isoformat(), len(items))
    return snapshot


class BoardPoller:
    """
    Periodic refresh loop running as a single asyncio task.

    The first cycle runs immediately, then one per interval. A cycle always
    completes before the next one starts; `lock` is shared with on-demand
    refreshes for the same guarantee.
    """

    def __init__(
        self,
        cache: SnapshotCache,
        client: BoardClient,
        interval_seconds: float,
        *,
        log_sample: bool = False,
    ) -> None:
        if interval_seconds <= 0:
            raise ValueError("interval_seconds must be positive")

        self.cache = cache
        self.client = client
        self.interval_seconds = interval_seconds
        self.log_sample = log_sample
        self.lock = asyncio.Lock()
        self._task: asyncio.Task | None = None

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    async def refresh_once(self) -> BoardSnapshot:
        async with self.lock:
            return await refresh_board(self.cache, self.client, log_sample=self.log_sample)

    async def _run(self) -> None:
        while True:
            await self.refresh_once()
            await asyncio.sleep(self.interval_seconds)

    def start(self) -> None:
        if self.running:
            return
        logger.info("Starting board poller (every %gs)", self.interval_seconds)
        self._task = asyncio.create_task(self._run(), name="board-poller")

    async def stop(self) -> None:
        if self._task is None:
            return
        self._task.cancel()
        with contextlib.suppress(asyncio.CancelledError):
            await self._task
        self._task = None
