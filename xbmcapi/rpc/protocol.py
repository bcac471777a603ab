"""JSON-RPC 2.0 frame models exchanged with the media center."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

JSONRPC_VERSION = "2.0"
PING_METHOD = "JSONRPC.Ping"


@dataclass(slots=True)
class RpcError:
    """Normalized JSON-RPC error object."""

    code: int | None
    message: str
    data: Any = None


@dataclass(slots=True)
class RpcRequest:
    """JSON-RPC request frame."""

    id: int
    method: str
    params: dict[str, Any] = field(default_factory=dict)

    def to_payload(self) -> dict[str, Any]:
        return {"jsonrpc": JSONRPC_VERSION, "method": self.method, "params": self.params, "id": self.id}


@dataclass(slots=True)
class RpcResponse:
    """JSON-RPC response frame carrying either a result or an error."""

    id: Any
    result: Any = None
    error: RpcError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass(slots=True)
class RpcNotification:
    """Server-initiated message without an id (e.g. Player.OnPlay)."""

    method: str
    params: dict[str, Any] = field(default_factory=dict)
