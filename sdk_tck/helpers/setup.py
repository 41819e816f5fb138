"""Per-test setup and teardown calls against the server under test."""

from __future__ import annotations

from typing import Any

from sdk_tck.config.access import get_settings
from sdk_tck.rpc.request import json_rpc_request


async def set_operator(scope: Any, account_id: str, private_key: str) -> Any:
    """Point the scope's session at the funding and fee-paying operator account."""
    settings = get_settings()
    return await json_rpc_request(
        scope,
        "setup",
        {
            "operatorAccountId": account_id,
            "operatorPrivateKey": private_key,
            "nodeIp": settings.node_ip,
            "nodeAccountId": settings.node_account_id,
            "mirrorNetworkIp": settings.mirror_network,
        },
    )


async def reset(scope: Any) -> Any:
    """Drop the server-side client for the scope's session."""
    return await json_rpc_request(scope, "reset")
