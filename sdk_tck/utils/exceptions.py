"""
Exception hierarchy for the TCK harness.

Provides:
- Reserved JSON-RPC error codes used by the server under test
- A structured error base with an explicit kind (transport vs protocol)
- Transport errors (HTTP status / network failure)
- Protocol errors (well-formed JSON-RPC error replies)
"""

from __future__ import annotations

from enum import Enum
from typing import Any


class ErrorKind(Enum):
    """Where an RPC failure originated."""
    TRANSPORT = "transport"
    PROTOCOL = "protocol"


class ReservedErrorCode:
    """JSON-RPC reserved codes plus the TCK ledger error code."""
    PARSE_ERROR = -32700
    INVALID_REQUEST = -32600
    METHOD_NOT_FOUND = -32601
    INVALID_PARAMS = -32602
    INTERNAL_ERROR = -32603
    HEDERA_ERROR = -32001


class TckError(Exception):
    """Base exception for all harness errors."""

    name = "Error"

    def __init__(
        self,
        message: str,
        code: int | str = "TCK_ERROR",
        kind: ErrorKind = ErrorKind.PROTOCOL,
        data: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.kind = kind
        self.data = data

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "name": self.name,
            "kind": self.kind.value,
            "code": self.code,
            "message": self.message,
        }
        if self.data is not None:
            payload["data"] = self.data
        return payload

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"


class TransportError(TckError):
    """HTTP or network failure while talking to the JSON-RPC server."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(
            message,
            code="TRANSPORT_ERROR",
            kind=ErrorKind.TRANSPORT,
            data={"status_code": status_code} if status_code is not None else None,
        )
        self.status_code = status_code


class JsonRpcError(TckError):
    """A well-formed JSON-RPC error reply from the server under test."""

    def __init__(self, code: int, message: str, data: Any = None):
        super().__init__(message, code=code, kind=ErrorKind.PROTOCOL, data=data)

    @property
    def status(self) -> str | None:
        """Domain status string (e.g. ``INVALID_ACCOUNT_ID``) carried in ``data``."""
        if isinstance(self.data, dict):
            status = self.data.get("status")
            return str(status) if status is not None else None
        return None

    @property
    def is_method_not_found(self) -> bool:
        return self.code == ReservedErrorCode.METHOD_NOT_FOUND

    @property
    def is_internal(self) -> bool:
        return self.code == ReservedErrorCode.INTERNAL_ERROR

    @classmethod
    def from_rpc_error(cls, error: Any) -> "JsonRpcError":
        """Build from an ``RpcError`` frame."""
        return cls(error.code, error.message, error.data)

    def __str__(self) -> str:
        if self.status:
            return f"[{self.code}] {self.message} ({self.status})"
        return f"[{self.code}] {self.message}"


class ConfigError(TckError):
    """Invalid or missing TCK configuration."""

    def __init__(self, message: str, field: str | None = None):
        super().__init__(message, code="CONFIG_ERROR", data={"field": field} if field else None)
