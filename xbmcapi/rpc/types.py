"""Types shared by the transport and the client."""

from __future__ import annotations

import asyncio
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable

from xbmcapi.rpc.protocol import RpcRequest

SuccessHandler = Callable[[Any], Any]
ErrorHandler = Callable[[Exception], Any]
NotificationListener = Callable[[str, dict[str, Any]], Any]


class ConnectionState(str, Enum):
    """Lifecycle of the persistent socket."""
    UNCONNECTED = "unconnected"
    CONNECTING = "connecting"
    OPEN = "open"
    CLOSED = "closed"


@dataclass(slots=True)
class PendingCall:
    """Entry of the pending call table, keyed by request id."""

    request: RpcRequest
    on_success: SuccessHandler
    on_error: ErrorHandler
    future: asyncio.Future
    channel: str
    timeout_handle: asyncio.TimerHandle | None = None
