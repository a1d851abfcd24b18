# tests/conftest.py
from typing import Iterator

import pytest
from fastapi.testclient import TestClient

from app.main import create_app
from app.services.board_client import BoardClient, BoardClientError
from app.services.snapshot_cache import SnapshotCache


def _row(row_id: str, tr_class: str, *cells: str) -> str:
    tds = "".join(f'<td class="OtlkItem">{cell}</td>' for cell in cells)
    id_attr = f' id="{row_id}"' if row_id else ""
    return f'<tr{id_attr} class="{tr_class}">{tds}</tr>'


BOARD_HTML = (
    "<html><body><table>"
    "<tr><th>Status</th><th>Name</th><th>Contact</th></tr>"
    + _row("Row101", "InItem", "101", "In", "Zed Adams – Chief Pilot", "701.777.7868",
           "Sim&nbsp;&nbsp;building", "1145", "10/17 14:32")
    + _row("Row102", "OutItem", "102", "Out", "Amy Baker - Instructor", "777-7868",
           "", "9:30 AM", "MM/dd HH:mm")
    + _row("Row103", "UnavailableItem", "", "Unavailable", "Carl Diaz", "",
           "Vacation", "Thu PM mod", "—")
    + _row("", "FooItem", "104", "???", "Dana Evans", "+44 20 7946 0958",
           "", "", "")
    + _row("Row105", "InItem", "105", "In", "Too Short")
    + _row("Row", "OutItem", "", "Out", "No Identity", "", "", "", "")
    + _row("Row106", "OutItem", "106", "Out", "Aaron Cole", "5551234",
           "", "", "")
    + _row("Row101", "InItem", "101", "In", "Zed Adams – Chief Pilot", "701.777.7868",
           "Back soon", "1145", "10/17 14:40")
    + "</table></body></html>"
)


class FakeBoardClient(BoardClient):
    """
    BoardClient stand-in that serves queued pages (or raises queued errors)
    without any network access. The last entry is repeated once the queue
    is exhausted.
    """

    def __init__(self, *responses: "str | Exception") -> None:
        super().__init__(source_url="https://board.example.test/index.aspx")
        self._responses = list(responses) or [BOARD_HTML]
        self.calls = 0

    async def fetch_page(self) -> str:
        self.calls += 1
        response = self._responses[0]
        if len(self._responses) > 1:
            self._responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response


@pytest.fixture
def board_html() -> str:
    return BOARD_HTML


@pytest.fixture
def board_row():
    return _row


@pytest.fixture
def fake_board_client() -> FakeBoardClient:
    return FakeBoardClient(BOARD_HTML)


@pytest.fixture
def failing_board_client() -> FakeBoardClient:
    return FakeBoardClient(BoardClientError("Board fetch failed (status=503)"))


@pytest.fixture
def snapshot_cache() -> SnapshotCache:
    return SnapshotCache()


@pytest.fixture
def client(snapshot_cache, fake_board_client) -> Iterator[TestClient]:
    """
    TestClient over an app that never polls and never touches the network.
    """
    app = create_app(
        cache=snapshot_cache,
        client=fake_board_client,
        start_polling=False,
    )
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def make_board_client():
    """
    Factory for FakeBoardClient with a custom response sequence.
    """
    return FakeBoardClient
