"""Request façade used by every conformance test.

Injects the per-file session id, sends the call, and maps the outcome onto a
test result: a value, a skipped test, or a raised ``JsonRpcError``.
"""

from __future__ import annotations

import asyncio
import threading
from typing import Any, Protocol

import pytest
from loguru import logger

from sdk_tck.config.access import get_settings
from sdk_tck.utils.exceptions import JsonRpcError

from .protocol import RpcRequest
from .session import get_or_create_session_id
from .transport import HttpTransport, JsonRpcClient, create_id

NOT_IMPLEMENTED = "NOT_IMPLEMENTED"


class SkippableScope(Protocol):
    def skip(self, reason: str) -> None:
        ...


class PytestScope:
    """Wraps the pytest ``request`` fixture as a scope that can skip its test."""

    def __init__(self, request: Any):
        self.request = request

    @property
    def node(self) -> Any:
        return self.request.node

    def skip(self, reason: str) -> None:
        pytest.skip(reason)


_client_lock = threading.RLock()
_client: JsonRpcClient | None = None


def get_default_client() -> JsonRpcClient:
    """Process-wide client pointed at ``JSON_RPC_SERVER_URL``."""
    global _client
    with _client_lock:
        if _client is None:
            settings = get_settings()
            _client = JsonRpcClient(
                HttpTransport(settings.json_rpc_server_url, timeout=settings.request_timeout)
            )
        return _client


def set_default_client(client: JsonRpcClient | None) -> None:
    """Replace (or with None, drop) the process-wide client."""
    global _client
    with _client_lock:
        _client = client


def _skip(scope: Any, reason: str) -> None:
    skip = getattr(scope, "skip", None)
    if callable(skip):
        skip(reason)
        return
    pytest.skip(reason)


def is_not_implemented(result: Any) -> bool:
    return isinstance(result, dict) and result.get("error") == NOT_IMPLEMENTED


async def json_rpc_request(
    scope: Any,
    method: str,
    params: dict[str, Any] | None = None,
    *,
    expect_internal: bool = False,
    client: JsonRpcClient | None = None,
) -> Any:
    """Call ``method`` on the server under test within the scope's session.

    Args:
        scope: The test scope (``request`` fixture, ``PytestScope``, a pytest
            node, or None for calls made outside a test).
        method: JSON-RPC method name.
        params: Method params; ``sessionId`` is always added last.
        expect_internal: Do not retry ``-32603`` replies; the test expects one.
        client: Client override, defaults to the process-wide client.

    Returns:
        The ``result`` member of the reply.

    Raises:
        JsonRpcError: For any JSON-RPC error reply. ``-32601`` additionally
            skips the test first.
        TransportError: HTTP or network failure.
    """
    rpc = client or get_default_client()
    settings = get_settings()
    session_id = get_or_create_session_id(scope)
    call_params = {**(params or {}), "sessionId": session_id}

    retries = 0
    while True:
        response = await rpc.request_advanced(
            RpcRequest(method=method, params=call_params, id=create_id())
        )
        if response.ok:
            break
        error = JsonRpcError.from_rpc_error(response.error)
        if error.is_method_not_found:
            logger.warning("Method {} not found.", method)
            if scope is not None:
                _skip(scope, f"Method {method} not found")
            raise error
        if error.is_internal and not expect_internal and retries < settings.internal_error_retries:
            retries += 1
            logger.warning(
                "Internal error occurred for method {}. Retrying ({}/{})...",
                method,
                retries,
                settings.internal_error_retries,
            )
            await asyncio.sleep(settings.internal_error_retry_delay)
            continue
        raise error

    result = response.result
    if scope is not None and is_not_implemented(result):
        logger.warning("Method {} is not implemented by the server under test.", method)
        _skip(scope, f"Method {method} not implemented")
    return result
