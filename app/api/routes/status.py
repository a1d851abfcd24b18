# app/api/routes/status.py
from fastapi import APIRouter, Depends

from app.api.dependencies.board import get_board_poller, get_snapshot_cache
from app.core.config import get_settings
from app.schemas.board import BoardSnapshot, ServiceSummary
from app.services.board_refresh import BoardPoller
from app.services.snapshot_cache import SnapshotCache

router = APIRouter(tags=["Board"])


@router.get(
    "/",
    response_model=ServiceSummary,
    summary="Service summary",
    description="Name, source URL, last successful refresh, row count and last error.",
)
async def service_summary(
    cache: SnapshotCache = Depends(get_snapshot_cache),
    poller: BoardPoller = Depends(get_board_poller),
) -> ServiceSummary:
    snapshot = cache.snapshot
    return ServiceSummary(
        service=get_settings().APP_NAME,
        source=poller.client.source_url,
        last_fetched=snapshot.last_fetched,
        count=len(snapshot.items),
        error=snapshot.error,
    )


@router.get(
    "/api/status",
    response_model=BoardSnapshot,
    summary="Current in/out board",
    description=(
        "Latest successfully parsed board.\n\n"
        "- `items` are ordered by status (In, Out, Unavailable, Unknown) then name.\n"
        "- `lastFetched` is the time of the last successful refresh.\n"
        "- `error` is the most recent refresh failure, or null after a success.\n\n"
        "When the source is down the previous items keep being served."
    ),
    responses={
        200: {
            "content": {
                "application/json": {
                    "example": {
                        "lastFetched": "2025-01-10T10:30:00Z",
                        "items": [
                            {
                                "id": "42",
                                "status": "In",
                                "name": "Jane Doe",
                                "title": "Chief Pilot",
                                "contact": {
                                    "raw": "701.777.7868",
                                    "digits": "7017777868",
                                    "e164": "+17017777868",
                                    "pretty": "(701) 777-7868",
                                },
                                "remarks": "Sim building",
                                "returning": {
                                    "raw": "1145",
                                    "hhmm": "11:45",
                                    "pretty": "11:45",
                                    "tokens": ["11:45"],
                                },
                                "updated": {
                                    "local": "01/10 10:12",
                                    "isoGuess": "2025-01-10T10:12:00.000Z",
                                    "epochMs": 1736503920000,
                                    "debug": None,
                                },
                                "meta": {
                                    "trClass": "InItem",
                                    "rowIdAttr": "Row42",
                                    "parsedAt": "2025-01-10T10:30:00Z",
                                    "flags": {"isIn": True, "isOut": False, "isUnavailable": False},
                                },
                            }
                        ],
                        "error": None,
                    }
                }
            }
        }
    },
)
async def board_status(cache: SnapshotCache = Depends(get_snapshot_cache)) -> BoardSnapshot:
    return cache.snapshot
