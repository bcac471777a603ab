"""Serialization helpers for JSON-RPC frames."""

from __future__ import annotations

import json
from typing import Any

from xbmcapi.rpc.protocol import JSONRPC_VERSION, RpcError, RpcNotification, RpcRequest, RpcResponse
from xbmcapi.utils.exceptions import ProtocolMismatchError


def safe_dict(value: Any) -> dict[str, Any]:
    """Return the value when dict-like, otherwise an empty dict."""
    return value if isinstance(value, dict) else {}


def encode_request(request: RpcRequest) -> str:
    """Encode a request frame into one JSON document."""
    return json.dumps(request.to_payload(), ensure_ascii=False)


def _load(raw: str | bytes | dict[str, Any]) -> dict[str, Any]:
    if isinstance(raw, dict):
        return raw
    try:
        data = json.loads(raw)
    except (TypeError, ValueError) as exc:
        raise ProtocolMismatchError(f"message is not valid JSON: {exc}", payload=raw) from exc
    if not isinstance(data, dict):
        raise ProtocolMismatchError("message is not a JSON object", payload=data)
    return data


def decode_request(raw: str | bytes | dict[str, Any]) -> RpcRequest:
    """Parse a serialized request frame back into an RpcRequest."""
    data = _load(raw)
    if data.get("jsonrpc") != JSONRPC_VERSION:
        raise ProtocolMismatchError(f"unsupported jsonrpc version: {data.get('jsonrpc')!r}", payload=data)
    method = data.get("method")
    if not isinstance(method, str) or not method:
        raise ProtocolMismatchError("request has no method", payload=data)
    req_id = data.get("id")
    if not isinstance(req_id, int) or isinstance(req_id, bool):
        raise ProtocolMismatchError(f"request id must be an integer, got {req_id!r}", payload=data)
    return RpcRequest(id=req_id, method=method, params=safe_dict(data.get("params")))


def normalize_rpc_error(error: Any) -> RpcError:
    """Normalize unknown error payloads into RpcError."""
    row = safe_dict(error)
    code = row.get("code")
    return RpcError(
        code=code if isinstance(code, int) else None,
        message=str(row.get("message") or error or "rpc failed"),
        data=row.get("data"),
    )


def decode_message(raw: str | bytes | dict[str, Any]) -> RpcResponse | RpcNotification:
    """Decode a server message into a response or a notification.

    Raises ProtocolMismatchError for anything that is neither: invalid JSON,
    a non-object, or an object with no id and no method (for instance the
    ``{"error": ..., "id": null}`` the server sends for unparsable requests).
    """
    data = _load(raw)
    req_id = data.get("id")
    if req_id is not None:
        if data.get("error") is not None:
            return RpcResponse(id=req_id, error=normalize_rpc_error(data["error"]))
        if "result" in data:
            return RpcResponse(id=req_id, result=data["result"])
        raise ProtocolMismatchError(f"response {req_id!r} carries neither result nor error", payload=data)
    method = data.get("method")
    if isinstance(method, str) and method:
        return RpcNotification(method=method, params=safe_dict(data.get("params")))
    if data.get("error") is not None:
        err = normalize_rpc_error(data["error"])
        raise ProtocolMismatchError(f"error response without id: {err.message}", payload=data)
    raise ProtocolMismatchError("message has neither id nor method", payload=data)
