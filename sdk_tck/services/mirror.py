"""HTTP client for the mirror node REST (and REST Java) APIs."""

from __future__ import annotations

import json
from decimal import Decimal
from typing import Any

import httpx
from loguru import logger

from sdk_tck.config.schema import TckSettings
from sdk_tck.utils.exceptions import TckError
from sdk_tck.utils.retry import RetryPolicy, with_retry


class MirrorNodeError(TckError):
    def __init__(self, message: str, *, code: str = "MIRROR_NODE_ERROR", status_code: int | None = None):
        super().__init__(message, code=code, data={"status_code": status_code} if status_code is not None else None)
        self.status_code = status_code


def decode_json(text: str) -> Any:
    """Parse mirror JSON keeping every number exact (ints stay int, fractions become Decimal)."""
    return json.loads(text, parse_float=Decimal)


class MirrorNodeClient:
    """Read-only access to mirror node data.

    Every read goes through the retry policy because the mirror node ingests
    records some time after consensus.
    """

    def __init__(
        self,
        rest_url: str,
        rest_java_url: str | None = None,
        *,
        retry: RetryPolicy | None = None,
        timeout: float = 20.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.rest_url = rest_url.rstrip("/")
        self.rest_java_url = (rest_java_url or rest_url).rstrip("/")
        self.retry = retry or RetryPolicy()
        self.timeout = timeout
        self._transport = transport

    @classmethod
    def from_settings(cls, settings: TckSettings, **kwargs: Any) -> "MirrorNodeClient":
        return cls(settings.mirror_node_rest_url, settings.mirror_node_rest_java_url, **kwargs)

    async def _fetch(self, url: str, params: dict[str, Any] | None = None) -> Any:
        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
                resp = await client.get(url, params=params, headers={"Accept": "application/json"})
        except httpx.TimeoutException as exc:
            raise MirrorNodeError(f"mirror node timeout: GET {url}", code="MIRROR_NODE_TIMEOUT") from exc
        except httpx.RequestError as exc:
            raise MirrorNodeError(
                f"mirror node network error: GET {url}: {exc}", code="MIRROR_NODE_NETWORK_ERROR"
            ) from exc

        if resp.status_code >= 400:
            raise MirrorNodeError(
                f"mirror node http error {resp.status_code}: GET {url}",
                code="MIRROR_NODE_HTTP_ERROR",
                status_code=resp.status_code,
            )
        if not resp.content:
            raise MirrorNodeError(f"No data received: GET {url}", code="MIRROR_NODE_EMPTY", status_code=resp.status_code)
        try:
            body = decode_json(resp.text)
        except json.JSONDecodeError as exc:
            raise MirrorNodeError(
                f"mirror node bad response: non-json body for GET {url}",
                code="MIRROR_NODE_BAD_RESPONSE",
                status_code=resp.status_code,
            ) from exc
        if not body:
            raise MirrorNodeError(f"No data received: GET {url}", code="MIRROR_NODE_EMPTY", status_code=resp.status_code)
        return body

    async def get(self, path: str, params: dict[str, Any] | None = None, *, java: bool = False) -> Any:
        base = self.rest_java_url if java else self.rest_url
        url = f"{base}{path}"
        logger.debug("Mirror GET {} {}", url, params or "")
        return await with_retry(lambda: self._fetch(url, params), self.retry)

    async def get_account_data(self, account_id: str) -> dict[str, Any]:
        return await self.get(f"/api/v1/accounts/{account_id}")

    async def get_balance_data(self) -> dict[str, Any]:
        return await self.get("/api/v1/balances")

    async def get_token_data(self, token_id: str) -> dict[str, Any]:
        return await self.get(f"/api/v1/tokens/{token_id}")

    async def get_token_nft(self, token_id: str, serial_number: str | int) -> dict[str, Any]:
        return await self.get(f"/api/v1/tokens/{token_id}/nfts/{serial_number}")

    async def get_account_nfts(self, account_id: str, token_id: str | None = None) -> dict[str, Any]:
        params = {"token.id": token_id} if token_id else None
        return await self.get(f"/api/v1/accounts/{account_id}/nfts", params)

    async def get_hbar_allowances(self, account_id: str) -> dict[str, Any]:
        return await self.get(f"/api/v1/accounts/{account_id}/allowances/crypto")

    async def get_token_allowances(self, account_id: str) -> dict[str, Any]:
        return await self.get(f"/api/v1/accounts/{account_id}/allowances/tokens")

    async def get_nft_allowances(self, account_id: str) -> dict[str, Any]:
        return await self.get(f"/api/v1/accounts/{account_id}/allowances/nfts")

    async def get_token_relationships(self, account_id: str, token_id: str | None = None) -> dict[str, Any]:
        params = {"token.id": token_id} if token_id else None
        return await self.get(f"/api/v1/accounts/{account_id}/tokens", params)

    async def get_outgoing_token_airdrops(self, account_id: str) -> dict[str, Any]:
        return await self.get(f"/api/v1/accounts/{account_id}/airdrops/outstanding", java=True)

    async def get_incoming_token_airdrops(self, account_id: str) -> dict[str, Any]:
        return await self.get(f"/api/v1/accounts/{account_id}/airdrops/pending", java=True)

    async def get_topic_data(self, topic_id: str) -> dict[str, Any]:
        return await self.get(f"/api/v1/topics/{topic_id}")

    async def get_contract_data(self, contract_id: str) -> dict[str, Any]:
        return await self.get(f"/api/v1/contracts/{contract_id}")

    async def get_schedule_data(self, schedule_id: str) -> dict[str, Any]:
        return await self.get(f"/api/v1/schedules/{schedule_id}")

    async def get_network_nodes(self, node_id: int | str | None = None) -> dict[str, Any]:
        params = {"node.id": node_id} if node_id is not None else None
        return await self.get("/api/v1/network/nodes", params)
