"""JSON-RPC protocol, serialization and transport."""

from .protocol import JSONRPC_VERSION, PING_METHOD, RpcError, RpcNotification, RpcRequest, RpcResponse
from .serialization import decode_message, decode_request, encode_request, normalize_rpc_error, safe_dict
from .transport import JsonRpcTransport
from .types import ConnectionState, PendingCall

__all__ = [
    "JSONRPC_VERSION",
    "PING_METHOD",
    "ConnectionState",
    "JsonRpcTransport",
    "PendingCall",
    "RpcError",
    "RpcNotification",
    "RpcRequest",
    "RpcResponse",
    "decode_message",
    "decode_request",
    "encode_request",
    "normalize_rpc_error",
    "safe_dict",
]
