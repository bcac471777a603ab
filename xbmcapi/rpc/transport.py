"""JSON-RPC transport: persistent WebSocket with an HTTP POST fallback."""

from __future__ import annotations

import asyncio
import contextlib
import itertools
from typing import Any

import httpx
import websockets
from loguru import logger
from websockets.exceptions import ConnectionClosed, WebSocketException

from xbmcapi.handlers import DefaultHandlers
from xbmcapi.rpc.protocol import PING_METHOD, RpcNotification, RpcRequest, RpcResponse
from xbmcapi.rpc.serialization import decode_message, encode_request
from xbmcapi.rpc.types import (
    ConnectionState,
    ErrorHandler,
    NotificationListener,
    PendingCall,
    SuccessHandler,
)
from xbmcapi.utils.exceptions import (
    ProtocolMismatchError,
    RemoteError,
    RequestTimeoutError,
    TransportUnavailableError,
)

SOCKET = "socket"
HTTP = "http"


def _consume_exception(future: asyncio.Future) -> None:
    # The error handler already reported it; keep asyncio from warning again.
    if not future.cancelled():
        future.exception()


def _is_request_id(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


class JsonRpcTransport:
    """Correlates JSON-RPC requests and responses by id over socket or HTTP."""

    def __init__(
        self,
        *,
        socket_url: str | None,
        http_url: str | None = None,
        handlers: DefaultHandlers | None = None,
        connect_timeout: float = 5.0,
        request_timeout: float | None = None,
        http_auth: tuple[str, str] | None = None,
        http_transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.socket_url = socket_url
        self.http_url = http_url
        self.handlers = handlers or DefaultHandlers()
        self.connect_timeout = connect_timeout
        self.request_timeout = request_timeout
        self._http_auth = http_auth
        self._http_transport = http_transport

        self._ids = itertools.count(1)
        self._pending: dict[int, PendingCall] = {}
        self._listeners: dict[str, list[NotificationListener]] = {}
        self._state = ConnectionState.UNCONNECTED
        self._opened = False
        self._ws: Any = None
        self._http: httpx.AsyncClient | None = None
        self._reader_task: asyncio.Task | None = None
        self._keepalive_task: asyncio.Task | None = None
        self._tasks: set[asyncio.Task] = set()

    @property
    def state(self) -> ConnectionState:
        return self._state

    @property
    def opened(self) -> bool:
        """True once open() ran, even if only the HTTP channel is usable."""
        return self._opened

    @property
    def pending_ids(self) -> list[int]:
        return list(self._pending)

    @property
    def http_available(self) -> bool:
        return self._http is not None

    async def _connect_socket(self) -> Any:
        # Keep-alive runs at the JSON-RPC level, so protocol pings are off.
        return await websockets.connect(
            self.socket_url,
            open_timeout=self.connect_timeout,
            ping_interval=None,
        )

    async def open(self) -> None:
        """Open the socket and prepare the HTTP fallback."""
        if self._state in (ConnectionState.CONNECTING, ConnectionState.OPEN):
            return
        self._opened = True
        if self.http_url and self._http is None:
            self._http = httpx.AsyncClient(
                timeout=httpx.Timeout(self.request_timeout or 20.0, connect=self.connect_timeout),
                auth=self._http_auth,
                transport=self._http_transport,
            )
        if not self.socket_url:
            logger.debug("No socket URL configured, using HTTP only")
            return

        self._state = ConnectionState.CONNECTING
        logger.info(f"Connecting to {self.socket_url}")
        try:
            ws = await self._connect_socket()
        except (OSError, asyncio.TimeoutError, WebSocketException) as exc:
            self._state = ConnectionState.CLOSED
            fallback = f", falling back to {self.http_url}" if self._http else ""
            logger.warning(f"Socket connection to {self.socket_url} failed: {exc}{fallback}")
            return
        self._ws = ws
        self._state = ConnectionState.OPEN
        logger.info(f"Connected to {self.socket_url}")
        self._reader_task = asyncio.get_running_loop().create_task(self._read_loop(ws))

    async def close(self) -> None:
        """Stop the keep-alive, close both channels and fail pending calls."""
        self.stop_keepalive()
        ws, self._ws = self._ws, None
        if self._state is not ConnectionState.UNCONNECTED:
            self._state = ConnectionState.CLOSED
        if ws is not None:
            with contextlib.suppress(WebSocketException, OSError):
                await ws.close()
        if self._reader_task is not None:
            self._reader_task.cancel()
            with contextlib.suppress(asyncio.CancelledError):
                await self._reader_task
            self._reader_task = None
        for task in list(self._tasks):
            task.cancel()
        if self._http is not None:
            await self._http.aclose()
            self._http = None
        self._fail_pending(None, "transport closed")
        logger.info("Transport closed")

    def call(
        self,
        method: str,
        params: dict[str, Any] | None = None,
        on_success: SuccessHandler | None = None,
        on_error: ErrorHandler | None = None,
    ) -> asyncio.Future:
        """Send a request and return a future; handlers run when the reply arrives.

        Never raises for network conditions: an unusable transport is reported
        through the error handler and the returned future.
        """
        loop = asyncio.get_running_loop()
        request = RpcRequest(id=next(self._ids), method=method, params=dict(params or {}))
        future = loop.create_future()
        future.add_done_callback(_consume_exception)
        channel = self._select_channel()
        pending = PendingCall(
            request=request,
            on_success=on_success or self.handlers.success,
            on_error=on_error or self.handlers.error,
            future=future,
            channel=channel or "",
        )
        if channel is None:
            self._reject(pending, TransportUnavailableError(f"no open channel for {method}", method=method))
            return future

        self._pending[request.id] = pending
        if self.request_timeout:
            pending.timeout_handle = loop.call_later(self.request_timeout, self._expire, request.id)
        send = self._send_socket if channel == SOCKET else self._send_http
        self._spawn(send(pending))
        logger.debug(f"-> {method} #{request.id} via {channel}")
        return future

    def subscribe(self, method: str, listener: NotificationListener) -> None:
        """Register a listener for a server notification ("*" for all)."""
        self._listeners.setdefault(method, []).append(listener)

    def unsubscribe(self, method: str, listener: NotificationListener) -> None:
        listeners = self._listeners.get(method, [])
        if listener in listeners:
            listeners.remove(listener)

    def start_keepalive(self, interval: float, *, suppress_errors: bool = False) -> None:
        """Ping the server every ``interval`` seconds until close()."""
        if self._keepalive_task is not None and not self._keepalive_task.done():
            return
        loop = asyncio.get_running_loop()
        self._keepalive_task = loop.create_task(self._keepalive_loop(interval, suppress_errors))

    def stop_keepalive(self) -> None:
        if self._keepalive_task is not None:
            self._keepalive_task.cancel()
            self._keepalive_task = None

    async def _keepalive_loop(self, interval: float, suppress_errors: bool) -> None:
        on_error = self._log_keepalive_failure if suppress_errors else None
        while True:
            await asyncio.sleep(interval)
            self.call(PING_METHOD, {}, on_error=on_error)

    @staticmethod
    def _log_keepalive_failure(error: Exception) -> None:
        logger.debug(f"Keep-alive failed: {error}")

    def _select_channel(self) -> str | None:
        if self._state is ConnectionState.OPEN and self._ws is not None:
            return SOCKET
        if self._http is not None and self.http_url:
            return HTTP
        return None

    def _spawn(self, coro: Any) -> None:
        task = asyncio.get_running_loop().create_task(coro)
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)

    async def _send_socket(self, pending: PendingCall) -> None:
        ws = self._ws
        if ws is None:
            self._fail(pending.request.id, TransportUnavailableError(
                "socket closed before send", method=pending.request.method, channel=SOCKET,
            ))
            return
        try:
            await ws.send(encode_request(pending.request))
        except (ConnectionClosed, OSError) as exc:
            self._fail(pending.request.id, TransportUnavailableError(
                f"socket send failed for {pending.request.method}",
                method=pending.request.method,
                channel=SOCKET,
                cause=str(exc),
            ))

    async def _send_http(self, pending: PendingCall) -> None:
        method = pending.request.method
        try:
            resp = await self._http.post(
                self.http_url,
                content=encode_request(pending.request),
                headers={"Content-Type": "application/json"},
            )
            resp.raise_for_status()
        except httpx.TimeoutException as exc:
            error = TransportUnavailableError(f"HTTP timeout for {method}", method=method, channel=HTTP, cause=str(exc))
        except httpx.HTTPStatusError as exc:
            error = TransportUnavailableError(
                f"HTTP {exc.response.status_code} for {method}", method=method, channel=HTTP, cause=str(exc),
            )
        except httpx.RequestError as exc:
            error = TransportUnavailableError(f"HTTP request failed for {method}", method=method, channel=HTTP, cause=str(exc))
        else:
            self._handle_http_reply(pending, resp.text)
            return
        self._fail(pending.request.id, error)

    def _handle_http_reply(self, pending: PendingCall, raw: str) -> None:
        # The body answers this request only; anything else still ends the exchange.
        request_id = pending.request.id
        try:
            message = decode_message(raw)
        except ProtocolMismatchError as exc:
            self._fail_http_exchange(pending, exc)
            return
        if isinstance(message, RpcNotification):
            self._dispatch_notification(message)
            self._fail_http_exchange(pending, ProtocolMismatchError(
                f"HTTP reply to {pending.request.method} is a notification", payload=message.method,
            ))
            return
        if not _is_request_id(message.id) or message.id != request_id:
            self._fail_http_exchange(pending, ProtocolMismatchError(
                f"HTTP reply id {message.id!r} does not match request #{request_id}", payload=message.id,
            ))
            return
        current = self._pending.pop(request_id, None)
        if current is not None:
            self._settle(current, message)

    def _fail_http_exchange(self, pending: PendingCall, error: ProtocolMismatchError) -> None:
        logger.warning(f"Malformed HTTP reply for {pending.request.method}: {error.message}")
        if pending.on_error != self.handlers.error:
            self._schedule(self.handlers.error, error)
        self._fail(pending.request.id, error)

    async def _read_loop(self, ws: Any) -> None:
        try:
            async for message in ws:
                self._handle_message(message)
        except ConnectionClosed as exc:
            logger.warning(f"Socket connection closed: {exc}")
        finally:
            if self._ws is ws:
                self._ws = None
                self._state = ConnectionState.CLOSED
                self._fail_pending(SOCKET, "socket connection closed")

    def _handle_message(self, raw: Any) -> None:
        try:
            message = decode_message(raw)
        except ProtocolMismatchError as exc:
            logger.warning(f"Malformed message from server: {exc.message}")
            self._schedule(self.handlers.error, exc)
            return
        if isinstance(message, RpcNotification):
            self._dispatch_notification(message)
            return
        pending = self._pending.pop(message.id, None) if _is_request_id(message.id) else None
        if pending is None:
            exc = ProtocolMismatchError(f"response id {message.id!r} matches no pending call", payload=message.id)
            logger.warning(exc.message)
            self._schedule(self.handlers.error, exc)
            return
        self._settle(pending, message)

    def _settle(self, pending: PendingCall, response: RpcResponse) -> None:
        if pending.timeout_handle is not None:
            pending.timeout_handle.cancel()
        if response.error is not None:
            err = response.error
            self._reject(pending, RemoteError(pending.request.method, err.code, err.message, err.data))
            return
        logger.debug(f"<- {pending.request.method} #{pending.request.id}")
        self._schedule(pending.on_success, response.result)
        if not pending.future.done():
            pending.future.set_result(response.result)

    def _reject(self, pending: PendingCall, error: Exception) -> None:
        # Handler first, so it has run by the time an awaiting caller resumes.
        self._schedule(pending.on_error, error)
        if not pending.future.done():
            pending.future.set_exception(error)

    def _fail(self, request_id: int, error: Exception) -> None:
        pending = self._pending.pop(request_id, None)
        if pending is None:
            return
        if pending.timeout_handle is not None:
            pending.timeout_handle.cancel()
        self._reject(pending, error)

    def _fail_pending(self, channel: str | None, reason: str) -> None:
        for request_id, pending in list(self._pending.items()):
            if channel is None or pending.channel == channel:
                self._fail(request_id, TransportUnavailableError(
                    f"{reason} before {pending.request.method} completed",
                    method=pending.request.method,
                    channel=pending.channel,
                ))

    def _expire(self, request_id: int) -> None:
        pending = self._pending.get(request_id)
        if pending is None:
            return
        pending.timeout_handle = None
        self._fail(request_id, RequestTimeoutError(pending.request.method, self.request_timeout or 0.0))

    def _dispatch_notification(self, notification: RpcNotification) -> None:
        listeners = self._listeners.get(notification.method, []) + self._listeners.get("*", [])
        if not listeners:
            logger.debug(f"Unhandled notification {notification.method}")
            return
        for listener in listeners:
            self._schedule(listener, notification.method, notification.params)

    @staticmethod
    def _schedule(callback: Any, *args: Any) -> None:
        asyncio.get_running_loop().call_soon(callback, *args)
