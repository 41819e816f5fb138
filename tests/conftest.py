"""Pytest hooks and fixtures."""

import json
from typing import Any, Callable

import httpx
import pytest

from sdk_tck.config.access import clear_settings_cache
from sdk_tck.rpc.request import set_default_client
from sdk_tck.rpc.transport import HttpTransport, JsonRpcClient
from sdk_tck.verify.dual_source import set_default_sources

pytest_plugins = ["pytester"]

TCK_ENV_VARS = (
    "JSON_RPC_SERVER_URL",
    "MIRROR_NODE_REST_URL",
    "MIRROR_NODE_REST_JAVA_URL",
    "NODE_IP",
    "NODE_ACCOUNT_ID",
    "MIRROR_NETWORK",
    "OPERATOR_ACCOUNT_ID",
    "OPERATOR_ACCOUNT_PRIVATE_KEY",
    "NODE_TIMEOUT",
    "NODE_TYPE",
    "REQUEST_TIMEOUT",
    "INTERNAL_ERROR_RETRIES",
    "INTERNAL_ERROR_RETRY_DELAY",
    "SDK_TCK_LOG_FILE",
)

Reply = dict[str, Any] | Callable[[dict[str, Any]], dict[str, Any]]


@pytest.fixture(autouse=True)
def isolated_tck_env(monkeypatch, tmp_path):
    """No stray .env, no inherited TCK variables, no cached settings or clients."""
    monkeypatch.chdir(tmp_path)
    for name in TCK_ENV_VARS:
        # setenv first so the variable is removed again on undo
        monkeypatch.setenv(name, "unset")
        monkeypatch.delenv(name)
    clear_settings_cache()
    set_default_client(None)
    set_default_sources(None)
    yield
    clear_settings_cache()
    set_default_client(None)
    set_default_sources(None)


class FakeRpcServer:
    """Scripted JSON-RPC server behind ``httpx.MockTransport``.

    Unknown methods answer ``-32601``; replies may be dicts (``{"result": ...}``
    or ``{"error": {...}}``) or callables taking the request body.
    """

    def __init__(self) -> None:
        self.calls: list[dict[str, Any]] = []
        self.replies: dict[str, list[Reply]] = {}

    def on(self, method: str, *replies: Reply) -> "FakeRpcServer":
        """Queue replies for ``method``; the last one repeats."""
        self.replies[method] = list(replies)
        return self

    def handler(self, request: httpx.Request) -> httpx.Response:
        body = json.loads(request.content)
        self.calls.append(body)
        queue = self.replies.get(body["method"])
        if not queue:
            reply: dict[str, Any] = {"error": {"code": -32601, "message": "Method not found"}}
        else:
            entry = queue.pop(0) if len(queue) > 1 else queue[0]
            reply = entry(body) if callable(entry) else entry
        return httpx.Response(200, json={"jsonrpc": "2.0", "id": body.get("id"), **reply})

    def methods(self) -> list[str]:
        return [call["method"] for call in self.calls]

    def client(self) -> JsonRpcClient:
        return JsonRpcClient(HttpTransport("http://tck.test", transport=httpx.MockTransport(self.handler)))


@pytest.fixture
def rpc_server() -> FakeRpcServer:
    """A fake server installed as the process-wide JSON-RPC client."""
    server = FakeRpcServer()
    set_default_client(server.client())
    return server


@pytest.fixture
def fast_internal_retries(monkeypatch):
    monkeypatch.setenv("INTERNAL_ERROR_RETRY_DELAY", "0")
    clear_settings_cache()


class RecordingScope:
    """Scope stand-in whose ``skip`` records instead of raising."""

    def __init__(self) -> None:
        self.skipped: list[str] = []

    def skip(self, reason: str) -> None:
        self.skipped.append(reason)


@pytest.fixture
def recording_scope() -> RecordingScope:
    return RecordingScope()
