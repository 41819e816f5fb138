from decimal import Decimal

import httpx
import pytest

from sdk_tck.config.schema import TckSettings
from sdk_tck.services.mirror import MirrorNodeClient, MirrorNodeError, decode_json
from sdk_tck.utils.retry import RetryPolicy


def _mirror(handler, attempts: int = 1) -> MirrorNodeClient:
    return MirrorNodeClient(
        "http://mirror.test/",
        "http://mirror-java.test",
        retry=RetryPolicy(max_retries=attempts, retry_delay_seconds=0),
        transport=httpx.MockTransport(handler),
    )


def test_decode_json_keeps_amounts_exact() -> None:
    body = decode_json('{"balance": 123456789012345678901234567890, "rate": 0.1}')
    assert body["balance"] == 123456789012345678901234567890
    assert body["rate"] == Decimal("0.1")


def test_from_settings_uses_both_urls() -> None:
    client = MirrorNodeClient.from_settings(TckSettings())
    assert client.rest_url == "http://127.0.0.1:5551"
    assert client.rest_java_url == "http://127.0.0.1:8084"


@pytest.mark.asyncio
async def test_get_account_data_hits_accounts_endpoint() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, text='{"account": "0.0.1001", "balance": {"balance": 1000}}')

    data = await _mirror(handler).get_account_data("0.0.1001")

    assert data["balance"]["balance"] == 1000
    assert str(seen[0].url) == "http://mirror.test/api/v1/accounts/0.0.1001"


@pytest.mark.asyncio
async def test_token_filters_are_sent_as_query_params() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json={"tokens": []})

    await _mirror(handler).get_token_relationships("0.0.1001", "0.0.2002")

    assert seen[0].url.path == "/api/v1/accounts/0.0.1001/tokens"
    assert seen[0].url.params["token.id"] == "0.0.2002"


@pytest.mark.asyncio
async def test_airdrops_use_rest_java_url() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json={"airdrops": []})

    client = _mirror(handler)
    await client.get_outgoing_token_airdrops("0.0.5")
    await client.get_incoming_token_airdrops("0.0.5")

    assert [str(request.url) for request in seen] == [
        "http://mirror-java.test/api/v1/accounts/0.0.5/airdrops/outstanding",
        "http://mirror-java.test/api/v1/accounts/0.0.5/airdrops/pending",
    ]


@pytest.mark.asyncio
async def test_not_found_is_retried_until_the_record_appears() -> None:
    calls: list[int] = []

    def handler(request: httpx.Request) -> httpx.Response:
        calls.append(1)
        if len(calls) < 3:
            return httpx.Response(404, json={"_status": {"messages": [{"message": "Not found"}]}})
        return httpx.Response(200, json={"topic_id": "0.0.9", "memo": "m"})

    data = await _mirror(handler, attempts=5).get_topic_data("0.0.9")

    assert data["memo"] == "m"
    assert len(calls) == 3


@pytest.mark.asyncio
async def test_http_error_is_raised_after_retries() -> None:
    with pytest.raises(MirrorNodeError) as exc_info:
        await _mirror(lambda request: httpx.Response(404), attempts=2).get_token_data("0.0.1")

    assert exc_info.value.status_code == 404
    assert exc_info.value.code == "MIRROR_NODE_HTTP_ERROR"


@pytest.mark.asyncio
async def test_empty_body_is_an_error() -> None:
    with pytest.raises(MirrorNodeError) as exc_info:
        await _mirror(lambda request: httpx.Response(200)).get_balance_data()
    assert exc_info.value.code == "MIRROR_NODE_EMPTY"


@pytest.mark.asyncio
async def test_network_error_is_wrapped() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("refused", request=request)

    with pytest.raises(MirrorNodeError) as exc_info:
        await _mirror(handler).get_contract_data("0.0.1")
    assert exc_info.value.code == "MIRROR_NODE_NETWORK_ERROR"
    assert isinstance(exc_info.value.__cause__, httpx.ConnectError)
