"""XBMC JSON-RPC client."""

from __future__ import annotations

import asyncio
from typing import Any

import httpx
from loguru import logger

from xbmcapi.config.schema import ClientConfig
from xbmcapi.handlers import DefaultHandlers
from xbmcapi.methods import GUI, JSONRPC, Addons, Application, AudioLibrary, Files, VideoLibrary
from xbmcapi.rpc.transport import JsonRpcTransport
from xbmcapi.rpc.types import ErrorHandler, NotificationListener, SuccessHandler
from xbmcapi.utils.exceptions import ClientNotInitializedError, DirectAccessDisabledError


class XBMC:
    """Client for one media center.

    Owns its configuration, its transport, its default handlers and its
    keep-alive; nothing is shared between instances.

    Usage:
        async with XBMC("kodi.local", verbose=True) as xbmc:
            movies = await xbmc.video_library.get_movies(properties=["title", "year"])
    """

    def __init__(
        self,
        hostname: str | None = None,
        port: int | None = None,
        *,
        config: ClientConfig | None = None,
        handlers: DefaultHandlers | None = None,
        http_transport: httpx.AsyncBaseTransport | None = None,
        **options: Any,
    ):
        overrides = {k: v for k, v in {"hostname": hostname, "port": port, **options}.items() if v is not None}
        base = config or ClientConfig()
        self.config = ClientConfig(**{**base.model_dump(), **overrides}) if overrides else base
        self.handlers = handlers or DefaultHandlers(verbose=self.config.verbose)
        self.transport = JsonRpcTransport(
            socket_url=self.config.socket_url,
            http_url=self.config.http_url if self.config.http_fallback else None,
            handlers=self.handlers,
            connect_timeout=self.config.connect_timeout_seconds,
            request_timeout=self.config.request_timeout_seconds,
            http_auth=self.config.http_auth,
            http_transport=http_transport,
        )
        self.video_library = VideoLibrary(self)
        self.audio_library = AudioLibrary(self)
        self.files = Files(self)
        self.application = Application(self)
        self.gui = GUI(self)
        self.addons = Addons(self)
        self.jsonrpc = JSONRPC(self)

    async def __aenter__(self) -> XBMC:
        return await self.connect()

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.close()

    async def connect(self) -> XBMC:
        """Open the transport and start the keep-alive."""
        await self.transport.open()
        if self.config.ping_interval_ms > 0:
            self.transport.start_keepalive(
                self.config.ping_interval_seconds,
                suppress_errors=self.config.suppress_keepalive_errors,
            )
        logger.debug(f"XBMC client ready ({self.transport.state.value}, http={self.transport.http_available})")
        return self

    async def close(self) -> None:
        await self.transport.close()

    def send(
        self,
        method: str,
        params: dict[str, Any] | None = None,
        on_success: SuccessHandler | None = None,
        on_error: ErrorHandler | None = None,
    ) -> asyncio.Future:
        """Forward a call to the transport; façade methods end up here."""
        if not self.transport.opened:
            raise ClientNotInitializedError(method)
        return self.transport.call(method, params, on_success, on_error)

    def custom(
        self,
        method: str,
        params: dict[str, Any] | None = None,
        on_success: SuccessHandler | None = None,
        on_error: ErrorHandler | None = None,
    ) -> asyncio.Future:
        """Call any method with raw params, bypassing the façade.

        Only available when the client was built with allow_direct_access.
        """
        if not self.config.allow_direct_access:
            raise DirectAccessDisabledError(method)
        return self.send(method, params, on_success, on_error)

    def ping(self, on_success: SuccessHandler | None = None, on_error: ErrorHandler | None = None) -> asyncio.Future:
        return self.jsonrpc.ping(on_success=on_success, on_error=on_error)

    def on_notification(self, method: str, listener: NotificationListener) -> None:
        """Receive server notifications such as "Player.OnPlay" ("*" for all)."""
        self.transport.subscribe(method, listener)

    def remove_notification_listener(self, method: str, listener: NotificationListener) -> None:
        self.transport.unsubscribe(method, listener)

    def __repr__(self) -> str:
        return f"<XBMC {self.config.socket_url} {self.transport.state.value}>"
