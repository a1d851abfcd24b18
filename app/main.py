# app/main.py
from contextlib import asynccontextmanager

from fastapi import FastAPI

from app.api.routes import health, internal, status
from app.core.config import Settings, get_settings
from app.core.logging import configure_logging
from app.services.board_client import BoardClient, get_board_client
from app.services.board_refresh import BoardPoller
from app.services.snapshot_cache import SnapshotCache


def create_app(
    settings: Settings | None = None,
    *,
    cache: SnapshotCache | None = None,
    client: BoardClient | None = None,
    start_polling: bool | None = None,
) -> FastAPI:
    """
    Application factory for the in/out board feed.

    `cache`, `client` and `start_polling` default to the values derived
    from settings; tests pass their own to stay off the network.
    """
    settings = settings or get_settings()
    configure_logging(settings.LOG_LEVEL)

    snapshot_cache = cache or SnapshotCache()
    poller = BoardPoller(
        snapshot_cache,
        client or get_board_client(),
        settings.POLL_SECONDS,
        log_sample=settings.LOG_SAMPLE,
    )
    polling = settings.POLLING_ENABLED if start_polling is None else start_polling

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if polling:
            poller.start()
        yield
        await poller.stop()

    app = FastAPI(
        title=settings.APP_NAME,
        description=(
            "Polls a public in/out status board and republishes it as a stable,\n"
            "typed JSON feed: status, name/title, normalized phone, returning time\n"
            "and last-updated timestamp per person."
        ),
        version="1.0.0",
        lifespan=lifespan,
    )
    app.state.snapshot_cache = snapshot_cache
    app.state.board_poller = poller

    # Routers
    app.include_router(status.router)
    app.include_router(health.router)
    app.include_router(internal.router)

    return app


app = create_app()


if __name__ == "__main__":  # pragma: no cover
    import uvicorn

    _settings = get_settings()
    uvicorn.run("app.main:app", host=_settings.HOST, port=_settings.PORT)
