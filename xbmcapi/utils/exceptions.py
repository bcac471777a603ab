"""
Exception hierarchy for xbmcapi.

Provides:
- A base exception carrying an error code, category and details
- One subclass per failure mode of the client (synchronous and asynchronous)
- Safe error message formatting (no credential leak into logs)
"""

from __future__ import annotations

import re
from enum import Enum
from typing import Any


class ErrorCategory(Enum):
    """Error categories for classification."""
    VALIDATION = "validation"
    STATE = "state"
    CONNECTION = "connection"
    REMOTE = "remote"
    PROTOCOL = "protocol"
    TIMEOUT = "timeout"


class XbmcApiError(Exception):
    """Base exception for all xbmcapi errors."""

    def __init__(
        self,
        message: str,
        code: str = "UNKNOWN_ERROR",
        category: ErrorCategory = ErrorCategory.STATE,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.details = details or {}

    @property
    def retryable(self) -> bool:
        return self.category in (ErrorCategory.CONNECTION, ErrorCategory.TIMEOUT)

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": self.code,
            "message": self.message,
            "category": self.category.value,
            "details": self.details,
        }

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"


class ClientNotInitializedError(XbmcApiError):
    """Client used before its transport was opened."""

    def __init__(self, component: str = "client"):
        super().__init__(
            f"XBMC API not initialized: {component} used before XBMC.connect()",
            code="CLIENT_NOT_INITIALIZED",
            category=ErrorCategory.STATE,
            details={"component": component},
        )


class MissingRequiredParameterError(XbmcApiError):
    """A required argument of a remote method was omitted."""

    def __init__(self, method: str, parameter: str):
        super().__init__(
            f"{method}: required parameter '{parameter}' is not provided",
            code="MISSING_REQUIRED_PARAMETER",
            category=ErrorCategory.VALIDATION,
            details={"method": method, "parameter": parameter},
        )
        self.method = method
        self.parameter = parameter


class DirectAccessDisabledError(XbmcApiError):
    """custom() called on a client built without allow_direct_access."""

    def __init__(self, method: str):
        super().__init__(
            f"direct access is disabled; enable allow_direct_access to call {method}",
            code="DIRECT_ACCESS_DISABLED",
            category=ErrorCategory.STATE,
            details={"method": method},
        )


class TransportUnavailableError(XbmcApiError):
    """Neither the socket nor the HTTP channel could carry the request."""

    def __init__(self, message: str, *, method: str | None = None, channel: str | None = None, cause: str | None = None):
        details: dict[str, Any] = {}
        if method:
            details["method"] = method
        if channel:
            details["channel"] = channel
        if cause:
            details["cause"] = sanitize_error_message(cause)
        super().__init__(message, code="TRANSPORT_UNAVAILABLE", category=ErrorCategory.CONNECTION, details=details)


class RemoteError(XbmcApiError):
    """The server answered with a JSON-RPC error object."""

    def __init__(self, method: str, rpc_code: int | None, message: str, data: Any = None):
        super().__init__(
            f"{method} failed: {message}" + (f" (code {rpc_code})" if rpc_code is not None else ""),
            code="REMOTE_ERROR",
            category=ErrorCategory.REMOTE,
            details={"method": method, "rpc_code": rpc_code, "data": data},
        )
        self.method = method
        self.rpc_code = rpc_code
        self.data = data


class ProtocolMismatchError(XbmcApiError):
    """A message from the server could not be matched or parsed."""

    def __init__(self, message: str, payload: Any = None):
        details = {"payload": payload} if payload is not None else {}
        super().__init__(message, code="PROTOCOL_MISMATCH", category=ErrorCategory.PROTOCOL, details=details)


class RequestTimeoutError(XbmcApiError):
    """No response arrived within the configured request timeout."""

    def __init__(self, method: str, timeout_seconds: float):
        super().__init__(
            f"{method} timed out after {timeout_seconds}s",
            code="REQUEST_TIMEOUT",
            category=ErrorCategory.TIMEOUT,
            details={"method": method, "timeout_seconds": timeout_seconds},
        )


_SENSITIVE_PATTERNS = [
    re.compile(r"(?<=://)[^/\s:@]+:[^/\s@]+@"),
    re.compile(r"(password|token|secret|auth)[=:]\s*['\"]?([^\s'\"&]+)['\"]?", re.IGNORECASE),
    re.compile(r"basic\s+[a-zA-Z0-9+/]+=*", re.IGNORECASE),
]


def sanitize_error_message(message: str, replacement: str = "[REDACTED]") -> str:
    """Remove credentials from error messages before they reach a log."""
    sanitized = message
    for pattern in _SENSITIVE_PATTERNS:
        sanitized = pattern.sub(replacement, sanitized)
    return sanitized
