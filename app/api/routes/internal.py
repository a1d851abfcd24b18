# app/api/routes/internal.py
from http import HTTPStatus

from fastapi import APIRouter, Depends

from app.api.dependencies.board import get_board_poller
from app.api.dependencies.internal_auth import verify_internal_api_key
from app.schemas.board import RefreshResult
from app.services.board_refresh import BoardPoller

router = APIRouter(
    prefix="/internal",
    tags=["Internal"],
    dependencies=[Depends(verify_internal_api_key)],
)


@router.post(
    "/refresh",
    response_model=RefreshResult,
    status_code=HTTPStatus.OK,
    summary="Run one board refresh cycle now",
    description=(
        "Fetches and republishes the board immediately instead of waiting for "
        "the next scheduled cycle. Waits for a scheduled cycle that is already "
        "running.\n\n"
        "A failed fetch still returns 200 with `ok = false`; the previous "
        "board stays published."
    ),
    responses={
        401: {
            "description": "Missing or invalid internal API key (if configured).",
        },
    },
)
async def trigger_refresh(
    poller: BoardPoller = Depends(get_board_poller),
) -> RefreshResult:
    snapshot = await poller.refresh_once()
    return RefreshResult(
        ok=snapshot.error is None,
        last_fetched=snapshot.last_fetched,
        count=len(snapshot.items),
        error=snapshot.error,
    )
