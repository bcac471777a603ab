"""Helpers building a one-shot client for CLI commands."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from xbmcapi.client import XBMC
from xbmcapi.config.loader import load_config


def build_client(
    *,
    host: str | None = None,
    port: int | None = None,
    http_port: int | None = None,
    config_path: Path | None = None,
    verbose: bool | None = None,
) -> XBMC:
    """Client from the config file plus command-line overrides, without keep-alive."""
    config = load_config(
        config_path,
        hostname=host,
        port=port,
        http_port=http_port,
        verbose=verbose,
        ping_interval_ms=0,
        allow_direct_access=True,
    )
    return XBMC(config=config)


def parse_params(raw: str | None) -> dict[str, Any]:
    """Parse a --params JSON object."""
    if not raw:
        return {}
    value = json.loads(raw)
    if not isinstance(value, dict):
        raise ValueError("params must be a JSON object")
    return value


async def call_once(client: XBMC, method: str, params: dict[str, Any] | None = None) -> Any:
    """Connect, call one method and close; errors propagate from the future."""
    async with client:
        return await client.custom(method, params, on_error=_already_raised)


def _already_raised(error: Exception) -> None:
    # The awaiting command reports the error itself.
    return None
