"""JSON-RPC over HTTP: request ids, transport, and response correlation."""

from __future__ import annotations

import asyncio
import itertools
import json
import threading
from typing import Any, Callable, Protocol

import httpx
from loguru import logger

from sdk_tck.config.schema import DEFAULT_JSON_RPC_SERVER_URL
from sdk_tck.utils.exceptions import TransportError

from .protocol import RpcRequest, RpcResponse
from .serialization import decode_response_payload, encode_request

ReceiveFn = Callable[[Any], None]


class RequestIdCounter:
    """Process-wide monotonic request ids, starting at 0."""

    def __init__(self, start: int = 0):
        self._counter = itertools.count(start)
        self._lock = threading.Lock()

    def next_id(self) -> int:
        with self._lock:
            return next(self._counter)


_ID_COUNTER = RequestIdCounter()


def create_id() -> int:
    """Next id from the shared counter; ids never repeat within a process."""
    return _ID_COUNTER.next_id()


class Transport(Protocol):
    async def send(self, request: RpcRequest, receive: ReceiveFn) -> None:
        """Deliver ``request``; hand any reply body to ``receive``."""
        ...


class HttpTransport:
    """POSTs JSON-RPC envelopes to the server under test."""

    def __init__(
        self,
        url: str = DEFAULT_JSON_RPC_SERVER_URL,
        *,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.url = url
        self.timeout = timeout
        self._transport = transport

    async def send(self, request: RpcRequest, receive: ReceiveFn) -> None:
        logger.debug("JSON-RPC -> {} id={} method={}", self.url, request.id, request.method)
        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
                resp = await client.post(
                    self.url,
                    content=encode_request(request),
                    headers={"Content-Type": "application/json"},
                )
        except httpx.TimeoutException as exc:
            raise TransportError(f"JSON-RPC timeout: {request.method} -> {self.url}") from exc
        except httpx.RequestError as exc:
            raise TransportError(f"JSON-RPC network error: {request.method} -> {self.url}: {exc}") from exc

        if resp.status_code == 200:
            if not resp.content:
                return
            try:
                body = json.loads(resp.text)
            except json.JSONDecodeError as exc:
                raise TransportError(
                    f"JSON-RPC bad response: non-json body for {request.method}",
                    status_code=resp.status_code,
                ) from exc
            receive(body)
            return
        if not request.is_notification:
            raise TransportError(resp.reason_phrase or f"HTTP {resp.status_code}", status_code=resp.status_code)
        logger.debug("Ignoring HTTP {} for notification {}", resp.status_code, request.method)


class JsonRpcClient:
    """Correlates JSON-RPC replies with pending requests by id."""

    def __init__(self, transport: Transport):
        self.transport = transport
        self._pending: dict[int, asyncio.Future[RpcResponse]] = {}
        self._lock = threading.RLock()

    @property
    def pending_count(self) -> int:
        with self._lock:
            return len(self._pending)

    async def request_advanced(self, request: RpcRequest) -> RpcResponse:
        """Send ``request`` and return its correlated response (result or error)."""
        if request.id is None:
            request.id = create_id()
        req_id = request.id
        future: asyncio.Future[RpcResponse] = asyncio.get_running_loop().create_future()
        with self._lock:
            self._pending[req_id] = future
        try:
            await self.transport.send(request, self.receive)
            if not future.done():
                raise TransportError(f"No response correlated with request id {req_id} ({request.method})")
            return await future
        finally:
            with self._lock:
                self._pending.pop(req_id, None)

    async def request(self, method: str, params: dict[str, Any] | None = None) -> RpcResponse:
        return await self.request_advanced(RpcRequest(method=method, params=params or {}, id=create_id()))

    async def notify(self, method: str, params: dict[str, Any] | None = None) -> None:
        """Send a notification (no id); nothing is awaited back."""
        await self.transport.send(RpcRequest(method=method, params=params or {}), self.receive)

    def receive(self, payload: Any) -> None:
        """Resolve pending requests from a response body (single object or batch)."""
        rows = payload if isinstance(payload, list) else [payload]
        for row in rows:
            response = decode_response_payload(row)
            with self._lock:
                future = self._pending.get(response.id) if response.id is not None else None
            if future is None:
                logger.warning("Dropping JSON-RPC response with unknown id: {}", response.id)
                continue
            if not future.done():
                future.set_result(response)
