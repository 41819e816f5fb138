"""JSON-RPC harness: envelopes, transport, sessions, and the request façade."""

from sdk_tck.rpc.protocol import JSONRPC_VERSION, RpcError, RpcRequest, RpcResponse
from sdk_tck.rpc.request import (
    NOT_IMPLEMENTED,
    PytestScope,
    get_default_client,
    json_rpc_request,
    set_default_client,
)
from sdk_tck.rpc.session import SessionRegistry, get_or_create_session_id
from sdk_tck.rpc.transport import HttpTransport, JsonRpcClient, RequestIdCounter, create_id

__all__ = [
    "JSONRPC_VERSION",
    "RpcError",
    "RpcRequest",
    "RpcResponse",
    "NOT_IMPLEMENTED",
    "PytestScope",
    "get_default_client",
    "json_rpc_request",
    "set_default_client",
    "SessionRegistry",
    "get_or_create_session_id",
    "HttpTransport",
    "JsonRpcClient",
    "RequestIdCounter",
    "create_id",
]
