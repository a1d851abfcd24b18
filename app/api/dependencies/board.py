# app/api/dependencies/board.py
from fastapi import Request

from app.services.board_refresh import BoardPoller
from app.services.snapshot_cache import SnapshotCache


def get_snapshot_cache(request: Request) -> SnapshotCache:
    """
    FastAPI dependency returning the application's SnapshotCache.
    """
    return request.app.state.snapshot_cache


def get_board_poller(request: Request) -> BoardPoller:
    return request.app.state.board_poller
