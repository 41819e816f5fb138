"""Consensus node queries through the Hiero Python SDK.

The SDK is synchronous; every query runs in a worker thread so suites stay
on the asyncio loop.
"""

from __future__ import annotations

import asyncio
from typing import Any

import hiero_sdk_python as hiero
from loguru import logger

from sdk_tck.config.schema import TckSettings
from sdk_tck.utils.exceptions import ConfigError

LOCAL_NETWORK = "solo"
PUBLIC_TEST_NETWORK = "testnet"
CONTRACT_CALL_GAS = 100_000


def build_network(settings: TckSettings) -> Any:
    """Single configured node when NODE_IP / NODE_ACCOUNT_ID / MIRROR_NETWORK are set, else testnet."""
    if not settings.has_custom_network:
        logger.debug("Consensus client network: {}", PUBLIC_TEST_NETWORK)
        return hiero.Network(network=PUBLIC_TEST_NETWORK)
    logger.debug(
        "Consensus client network: node {} ({}), mirror {}",
        settings.node_ip,
        settings.node_account_id,
        settings.mirror_network,
    )
    return hiero.Network(
        network=LOCAL_NETWORK,
        nodes=[(settings.node_ip, hiero.AccountId.from_string(settings.node_account_id))],
        mirror_address=settings.mirror_network,
    )


def build_sdk_client(settings: TckSettings) -> Any:
    """Create an SDK client for the configured network with the operator set."""
    if not settings.operator_account_id or not settings.operator_account_private_key:
        raise ConfigError(
            "OPERATOR_ACCOUNT_ID and OPERATOR_ACCOUNT_PRIVATE_KEY are required for consensus queries",
            field="operator_account_id",
        )
    client = hiero.Client(build_network(settings))
    client.set_operator(
        hiero.AccountId.from_string(settings.operator_account_id),
        hiero.PrivateKey.from_string(settings.operator_account_private_key),
    )
    return client


class ConsensusInfoClient:
    """Typed info lookups (account, token, topic, file, contract, schedule) keyed by entity id."""

    def __init__(self, sdk_client: Any):
        self.sdk_client = sdk_client

    @classmethod
    def from_settings(cls, settings: TckSettings) -> "ConsensusInfoClient":
        return cls(build_sdk_client(settings))

    async def _execute(self, query: Any) -> Any:
        return await asyncio.to_thread(query.execute, self.sdk_client)

    async def get_balance(self, account_id: str) -> Any:
        query = hiero.CryptoGetAccountBalanceQuery().set_account_id(hiero.AccountId.from_string(account_id))
        return await self._execute(query)

    async def get_account_info(self, account_id: str) -> Any:
        query = hiero.AccountInfoQuery().set_account_id(hiero.AccountId.from_string(account_id))
        return await self._execute(query)

    async def get_token_info(self, token_id: str) -> Any:
        query = hiero.TokenInfoQuery().set_token_id(hiero.TokenId.from_string(token_id))
        return await self._execute(query)

    async def get_token_nft_info(self, token_id: str, serial_number: str | int) -> Any:
        nft_id = hiero.NftId(hiero.TokenId.from_string(token_id), int(serial_number))
        query = hiero.TokenNftInfoQuery().set_nft_id(nft_id)
        return await self._execute(query)

    async def get_topic_info(self, topic_id: str) -> Any:
        query = hiero.TopicInfoQuery().set_topic_id(hiero.TopicId.from_string(topic_id))
        return await self._execute(query)

    async def get_file_info(self, file_id: str) -> Any:
        query = hiero.FileInfoQuery().set_file_id(hiero.FileId.from_string(file_id))
        return await self._execute(query)

    async def get_file_contents(self, file_id: str) -> bytes:
        query = hiero.FileContentsQuery().set_file_id(hiero.FileId.from_string(file_id))
        return await self._execute(query)

    async def get_contract_info(self, contract_id: str) -> Any:
        query = hiero.ContractInfoQuery().set_contract_id(hiero.ContractId.from_string(contract_id))
        return await self._execute(query)

    async def get_contract_bytecode(self, contract_id: str) -> bytes:
        query = hiero.ContractBytecodeQuery().set_contract_id(hiero.ContractId.from_string(contract_id))
        return await self._execute(query)

    async def get_contract_function_result(self, contract_id: str, function_name: str) -> Any:
        query = (
            hiero.ContractCallQuery()
            .set_contract_id(hiero.ContractId.from_string(contract_id))
            .set_gas(CONTRACT_CALL_GAS)
            .set_function(function_name)
        )
        return await self._execute(query)

    async def get_schedule_info(self, schedule_id: str) -> Any:
        query = hiero.ScheduleInfoQuery().set_schedule_id(hiero.ScheduleId.from_string(schedule_id))
        return await self._execute(query)

    async def get_transaction_receipt(self, transaction_id: str) -> Any:
        query = hiero.TransactionGetReceiptQuery().set_transaction_id(
            hiero.TransactionId.from_string(transaction_id)
        )
        return await self._execute(query)
