"""Pytest hooks and fixtures."""

import asyncio
import json
import os
from typing import Any

import pytest

from xbmcapi.handlers import DefaultHandlers


def pytest_configure(config):
    """Register custom markers (also in pyproject.toml)."""
    config.addinivalue_line(
        "markers",
        "requires_server: talks to a real media center (skipped unless XBMCAPI_LIVE=1)",
    )


def pytest_collection_modifyitems(config, items):
    """Skip requires_server tests unless a live media center is available."""
    if os.environ.get("XBMCAPI_LIVE") == "1":
        return
    skip = pytest.mark.skip(reason="Requires a media center (set XBMCAPI_LIVE=1)")
    for item in items:
        if "requires_server" in item.keywords:
            item.add_marker(skip)


class FakeSocket:
    """In-memory stand-in for a websockets client connection."""

    def __init__(self) -> None:
        self.sent: list[dict[str, Any]] = []
        self.closed = False
        self._inbox: asyncio.Queue = asyncio.Queue()

    async def send(self, message: str) -> None:
        if self.closed:
            raise OSError("socket is closed")
        self.sent.append(json.loads(message))

    def push(self, frame: dict[str, Any] | str) -> None:
        self._inbox.put_nowait(frame if isinstance(frame, str) else json.dumps(frame))

    def reply(self, request_id: int, result: Any) -> None:
        self.push({"jsonrpc": "2.0", "id": request_id, "result": result})

    def hang_up(self) -> None:
        self._inbox.put_nowait(None)

    async def close(self) -> None:
        self.closed = True
        self._inbox.put_nowait(None)

    def __aiter__(self):
        return self

    async def __anext__(self) -> str:
        item = await self._inbox.get()
        if item is None:
            raise StopAsyncIteration
        return item


class RecordingHandlers(DefaultHandlers):
    """DefaultHandlers that remember what they were given."""

    def __init__(self, *, verbose: bool = False):
        super().__init__(verbose=verbose)
        self.results: list[Any] = []
        self.errors: list[Exception] = []

    def success(self, result: Any) -> None:
        self.results.append(result)

    def error(self, error: Exception) -> None:
        self.errors.append(error)


async def drain(rounds: int = 5) -> None:
    """Let scheduled tasks and call_soon callbacks run."""
    for _ in range(rounds):
        await asyncio.sleep(0)


@pytest.fixture
def fake_socket() -> FakeSocket:
    return FakeSocket()


@pytest.fixture
def handlers() -> RecordingHandlers:
    return RecordingHandlers()
