"""AccountBalanceQuery conformance."""

import pytest

from sdk_tck.helpers.account import create_account
from sdk_tck.helpers.keys import generate_ed25519_private_key
from sdk_tck.rpc.request import json_rpc_request
from sdk_tck.utils.exceptions import JsonRpcError
from sdk_tck.verify.account import verify_hbar_balance

pytestmark = [pytest.mark.asyncio, pytest.mark.tck]


async def test_queries_balance_of_account(tck_scope) -> None:
    key = await generate_ed25519_private_key(tck_scope)
    account_id = await create_account(tck_scope, key, initialBalance="10")

    response = await json_rpc_request(tck_scope, "getAccountBalance", {"accountId": account_id})

    assert response["balance"] == "10"
    await verify_hbar_balance(account_id, 10)


async def test_query_balance_with_no_params(tck_scope) -> None:
    with pytest.raises(JsonRpcError) as exc_info:
        await json_rpc_request(tck_scope, "getAccountBalance", {})
    assert exc_info.value.status == "INVALID_ACCOUNT_ID"


async def test_query_balance_of_missing_account(tck_scope) -> None:
    with pytest.raises(JsonRpcError) as exc_info:
        await json_rpc_request(tck_scope, "getAccountBalance", {"accountId": "123.456.789"})
    assert exc_info.value.status == "INVALID_ACCOUNT_ID"


async def test_query_balance_of_missing_contract(tck_scope) -> None:
    with pytest.raises(JsonRpcError) as exc_info:
        await json_rpc_request(tck_scope, "getAccountBalance", {"contractId": "123.456.789"})
    assert exc_info.value.status == "INVALID_CONTRACT_ID"
