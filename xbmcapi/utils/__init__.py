"""Utility functions for xbmcapi."""

from xbmcapi.utils.exceptions import (
    XbmcApiError,
    ClientNotInitializedError,
    MissingRequiredParameterError,
    DirectAccessDisabledError,
    TransportUnavailableError,
    RemoteError,
    ProtocolMismatchError,
    RequestTimeoutError,
    ErrorCategory,
    sanitize_error_message,
)

__all__ = [
    "XbmcApiError",
    "ClientNotInitializedError",
    "MissingRequiredParameterError",
    "DirectAccessDisabledError",
    "TransportUnavailableError",
    "RemoteError",
    "ProtocolMismatchError",
    "RequestTimeoutError",
    "ErrorCategory",
    "sanitize_error_message",
]
