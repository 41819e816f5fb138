"""Account lifecycle calls used by suites as fixtures."""

from __future__ import annotations

from typing import Any

from sdk_tck.config.access import get_settings
from sdk_tck.rpc.request import json_rpc_request


def signers(*keys: str) -> dict[str, Any]:
    """``commonTransactionParams`` signing with ``keys``."""
    return {"signers": list(keys)}


async def create_account(scope: Any, key: str, **extra: Any) -> str:
    """Create an account controlled by ``key`` and return its id."""
    result = await json_rpc_request(scope, "createAccount", {"key": key, **extra})
    return result["accountId"]


async def delete_account(
    scope: Any,
    delete_account_id: str,
    signer_private_key: str,
    transfer_account_id: str | None = None,
) -> Any:
    """Delete an account, sweeping its balance to the operator by default."""
    return await json_rpc_request(
        scope,
        "deleteAccount",
        {
            "deleteAccountId": delete_account_id,
            "transferAccountId": transfer_account_id or get_settings().operator_account_id,
            "commonTransactionParams": signers(signer_private_key),
        },
    )
