"""Serialization helpers for JSON-RPC frames."""

from __future__ import annotations

import json
from typing import Any

from sdk_tck.utils.exceptions import ReservedErrorCode

from .protocol import RpcError, RpcRequest, RpcResponse


def safe_dict(value: Any) -> dict[str, Any]:
    """Return the value when dict-like, otherwise an empty dict."""
    return value if isinstance(value, dict) else {}


def request_to_payload(request: RpcRequest) -> dict[str, Any]:
    """Build the wire dict; ``id`` is omitted for notifications."""
    payload: dict[str, Any] = {"jsonrpc": request.jsonrpc, "method": request.method, "params": request.params}
    if request.id is not None:
        payload["id"] = request.id
    return payload


def encode_request(request: RpcRequest) -> str:
    """Encode a request frame as a JSON document."""
    return json.dumps(request_to_payload(request), ensure_ascii=False)


def normalize_rpc_error(error: Any) -> RpcError:
    """Normalize an error member into RpcError."""
    row = safe_dict(error)
    code = row.get("code")
    return RpcError(
        code=code if isinstance(code, int) else ReservedErrorCode.INTERNAL_ERROR,
        message=str(row.get("message") or "rpc failed"),
        data=row.get("data"),
    )


def decode_response_payload(payload: Any) -> RpcResponse:
    """Decode a raw response dict into RpcResponse."""
    row = safe_dict(payload)
    raw_id = row.get("id")
    req_id = raw_id if isinstance(raw_id, int) else None
    if "error" in row and row.get("error") is not None:
        return RpcResponse(id=req_id, error=normalize_rpc_error(row.get("error")))
    return RpcResponse(id=req_id, result=row.get("result"))

