"""Token creation and minting shortcuts for suites."""

from __future__ import annotations

from typing import Any

from sdk_tck.config.access import get_settings
from sdk_tck.rpc.request import json_rpc_request

from .account import signers

TEST_TOKEN_NAME = "testname"
TEST_TOKEN_SYMBOL = "testsymbol"


async def get_new_fungible_token_id(
    scope: Any,
    admin_key: str | None = None,
    treasury_account_id: str | None = None,
) -> str:
    """Create a fungible token owned by the operator unless told otherwise."""
    settings = get_settings()
    result = await json_rpc_request(
        scope,
        "createToken",
        {
            "name": TEST_TOKEN_NAME,
            "symbol": TEST_TOKEN_SYMBOL,
            "adminKey": admin_key or settings.operator_account_private_key,
            "treasuryAccountId": treasury_account_id or settings.operator_account_id,
        },
    )
    return result["tokenId"]


async def create_token(
    scope: Any,
    fungible: bool,
    treasury_account_id: str,
    supply_key: str | None = None,
    initial_supply: str | None = None,
    admin_key: str | None = None,
    pause_key: str | None = None,
    decimals: int | None = None,
    max_supply: str | None = None,
    freeze_key: str | None = None,
    **extra: Any,
) -> str:
    """Create a token with only the optional fields that were given."""
    params: dict[str, Any] = {
        "name": TEST_TOKEN_NAME,
        "symbol": TEST_TOKEN_SYMBOL,
        "treasuryAccountId": treasury_account_id,
        "tokenType": "ft" if fungible else "nft",
    }
    if supply_key:
        params["supplyKey"] = supply_key
    if initial_supply:
        params["initialSupply"] = initial_supply
    if admin_key:
        params["adminKey"] = admin_key
        params["commonTransactionParams"] = signers(admin_key)
    if pause_key:
        params["pauseKey"] = pause_key
    if decimals:
        params["decimals"] = decimals
    if max_supply:
        params["supplyType"] = "finite"
        params["maxSupply"] = max_supply
    if freeze_key:
        params["freezeKey"] = freeze_key
    params.update(extra)

    result = await json_rpc_request(scope, "createToken", params)
    return result["tokenId"]


async def create_ft_token(scope: Any, **params: Any) -> str:
    """Create a fungible token from raw camelCase params, defaulting name, symbol and treasury."""
    settings = get_settings()
    payload = {
        "name": TEST_TOKEN_NAME,
        "symbol": TEST_TOKEN_SYMBOL,
        "treasuryAccountId": settings.operator_account_id,
        "initialSupply": "1000000",
        "tokenType": "ft",
        **params,
    }
    result = await json_rpc_request(scope, "createToken", payload)
    return result["tokenId"]


async def mint_token(
    scope: Any,
    token_id: str,
    *,
    amount: str | None = None,
    metadata: list[str] | None = None,
    supply_key: str | None = None,
) -> dict[str, Any]:
    """Mint fungible ``amount`` or NFTs with ``metadata``; returns the server reply."""
    params: dict[str, Any] = {"tokenId": token_id}
    if amount is not None:
        params["amount"] = amount
    if metadata is not None:
        params["metadata"] = metadata
    if supply_key:
        params["commonTransactionParams"] = signers(supply_key)
    return await json_rpc_request(scope, "mintToken", params)
