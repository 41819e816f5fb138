"""JSON-RPC 2.0 frame models."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

JSONRPC_VERSION = "2.0"


@dataclass(slots=True)
class RpcError:
    """Error member of a JSON-RPC response."""

    code: int
    message: str
    data: Any = None


@dataclass(slots=True)
class RpcRequest:
    """JSON-RPC request envelope; ``id`` is None for notifications."""

    method: str
    params: dict[str, Any] = field(default_factory=dict)
    id: int | None = None
    jsonrpc: str = JSONRPC_VERSION

    @property
    def is_notification(self) -> bool:
        return self.id is None


@dataclass(slots=True)
class RpcResponse:
    """JSON-RPC response envelope: exactly one of ``result``/``error`` is meaningful."""

    id: int | None
    result: Any = None
    error: RpcError | None = None
    jsonrpc: str = JSONRPC_VERSION

    @property
    def ok(self) -> bool:
        return self.error is None
