"""Fallback completion handlers used when a caller supplies none."""

from __future__ import annotations

import json
from typing import Any

from loguru import logger

from xbmcapi.utils.exceptions import XbmcApiError, sanitize_error_message


def _render(value: Any) -> str:
    try:
        return json.dumps(value, ensure_ascii=False, default=str)
    except (TypeError, ValueError):
        return repr(value)


class DefaultHandlers:
    """Per-client pair of default success/error handlers.

    The success handler only logs in verbose mode. The error handler always
    reports; errors are never dropped because verbose mode is off.
    """

    def __init__(self, *, verbose: bool = False):
        self.verbose = verbose

    def success(self, result: Any) -> None:
        if self.verbose:
            logger.info(f"XBMC API: {_render(result)}")

    def error(self, error: Exception) -> None:
        if isinstance(error, XbmcApiError):
            logger.error(f"XBMC API: {sanitize_error_message(f'{error} {_render(error.details)}')}")
        else:
            logger.error(f"XBMC API: {sanitize_error_message(repr(error))}")
