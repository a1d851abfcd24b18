# app/services/board_client.py
from __future__ import annotations

from typing import Optional

import httpx

from app.core.config import get_settings


class BoardClientError(RuntimeError):
    """
    Raised when the board page cannot be fetched: transport errors,
    timeouts and non-2xx responses.
    """


class BoardClient:
    """
    Minimal HTTP client for the public in/out board page.

    Responsibilities
    ----------------
    - Fetch the page markup with a bounded timeout and a fixed User-Agent.
    - Turn every transport or HTTP failure into BoardClientError so the
      refresh cycle has a single failure type to record.
    """

    def __init__(
        self,
        source_url: str,
        user_agent: str = "AreTheyInAPI/1.0",
        timeout_seconds: float = 20.0,
    ) -> None:
        if not source_url:
            raise ValueError("source_url is required")

        self._source_url = source_url
        self._user_agent = user_agent
        self._timeout_seconds = timeout_seconds

    @property
    def source_url(self) -> str:
        return self._source_url

    async def fetch_page(self) -> str:
        """
        Return the raw markup of the board page.

        Raises BoardClientError on any failure.
        """
        headers = {
            "User-Agent": self._user_agent,
            "Accept": "text/html,application/xhtml+xml",
        }

        try:
            async with httpx.AsyncClient(
                timeout=self._timeout_seconds,
                follow_redirects=True,
            ) as client:
                resp = await client.get(self._source_url, headers=headers)
        except httpx.TimeoutException as exc:
            raise BoardClientError(
                f"Board fetch timed out after {self._timeout_seconds:g}s"
            ) from exc
        except httpx.HTTPError as exc:
            raise BoardClientError(f"Board fetch failed: {exc}") from exc

        if resp.status_code // 100 != 2:
            raise BoardClientError(f"Board fetch failed (status={resp.status_code})")
        return resp.text


# Simple singleton-style accessor wired to app settings
_board_client_instance: Optional[BoardClient] = None


def get_board_client() -> BoardClient:
    """
    Lazily construct the shared BoardClient from application settings.
    """
    global _board_client_instance
    if _board_client_instance is None:
        settings = get_settings()
        _board_client_instance = BoardClient(
            source_url=str(settings.SOURCE_URL),
            user_agent=settings.USER_AGENT,
            timeout_seconds=settings.FETCH_TIMEOUT_SECONDS,
        )
    return _board_client_instance
