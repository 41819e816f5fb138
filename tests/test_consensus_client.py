import threading
from types import SimpleNamespace

import pytest

from sdk_tck.config.schema import TckSettings
from sdk_tck.services import consensus
from sdk_tck.services.consensus import ConsensusInfoClient, build_sdk_client
from sdk_tck.utils.exceptions import ConfigError


class FakeQuery:
    def __init__(self) -> None:
        self.calls: dict[str, object] = {}

    def __getattr__(self, name: str):
        if not name.startswith("set_"):
            raise AttributeError(name)

        def setter(value):
            self.calls[name] = value
            return self

        return setter

    def execute(self, client):
        return SimpleNamespace(query=self, client=client, thread=threading.current_thread())


class FakeId:
    @staticmethod
    def from_string(value: str) -> str:
        return f"id:{value}"


class FakeNetwork:
    def __init__(self, network: str, nodes=None, mirror_address=None) -> None:
        self.network = network
        self.nodes = nodes
        self.mirror_address = mirror_address


class FakeClient:
    def __init__(self, network: FakeNetwork) -> None:
        self.network = network
        self.operator = None

    def set_operator(self, account_id, private_key) -> None:
        self.operator = (account_id, private_key)


@pytest.fixture
def fake_sdk(monkeypatch) -> SimpleNamespace:
    sdk = SimpleNamespace(
        Client=FakeClient,
        Network=FakeNetwork,
        AccountId=FakeId,
        PrivateKey=FakeId,
        TokenId=FakeId,
        TopicId=FakeId,
        FileId=FakeId,
        ContractId=FakeId,
        ScheduleId=FakeId,
        TransactionId=FakeId,
        NftId=lambda token_id, serial: (token_id, serial),
        CryptoGetAccountBalanceQuery=FakeQuery,
        AccountInfoQuery=FakeQuery,
        TokenInfoQuery=FakeQuery,
        TokenNftInfoQuery=FakeQuery,
        TopicInfoQuery=FakeQuery,
        FileInfoQuery=FakeQuery,
        FileContentsQuery=FakeQuery,
        ContractInfoQuery=FakeQuery,
        ContractBytecodeQuery=FakeQuery,
        ContractCallQuery=FakeQuery,
        ScheduleInfoQuery=FakeQuery,
        TransactionGetReceiptQuery=FakeQuery,
    )
    monkeypatch.setattr(consensus, "hiero", sdk)
    return sdk


def _settings(**overrides) -> TckSettings:
    values = {"operator_account_id": "0.0.2", "operator_account_private_key": "302e"}
    values.update(overrides)
    return TckSettings(**values)


def test_build_sdk_client_requires_operator(fake_sdk) -> None:
    with pytest.raises(ConfigError):
        build_sdk_client(TckSettings())


def test_build_sdk_client_uses_testnet_by_default(fake_sdk) -> None:
    client = build_sdk_client(_settings())
    assert client.network.network == "testnet"
    assert client.operator == ("id:0.0.2", "id:302e")


def test_build_sdk_client_targets_the_configured_node(fake_sdk) -> None:
    client = build_sdk_client(
        _settings(node_ip="10.1.2.3:50211", node_account_id="0.0.7", mirror_network="10.1.2.3:5600")
    )

    assert client.network.network == consensus.LOCAL_NETWORK
    assert client.network.nodes == [("10.1.2.3:50211", "id:0.0.7")]
    assert client.network.mirror_address == "10.1.2.3:5600"


def test_partial_node_settings_fall_back_to_testnet(fake_sdk) -> None:
    client = build_sdk_client(_settings(node_ip="10.1.2.3:50211"))
    assert client.network.network == "testnet"
    assert client.network.nodes is None


@pytest.mark.asyncio
async def test_queries_run_off_the_event_loop(fake_sdk) -> None:
    sdk_client = object()
    info = await ConsensusInfoClient(sdk_client).get_token_info("0.0.1234")

    assert info.client is sdk_client
    assert info.query.calls == {"set_token_id": "id:0.0.1234"}
    assert info.thread is not threading.main_thread()


@pytest.mark.asyncio
async def test_nft_info_query_builds_nft_id(fake_sdk) -> None:
    info = await ConsensusInfoClient(object()).get_token_nft_info("0.0.7", "3")
    assert info.query.calls == {"set_nft_id": ("id:0.0.7", 3)}


@pytest.mark.asyncio
@pytest.mark.parametrize(
    ("method", "setter"),
    [
        ("get_balance", "set_account_id"),
        ("get_account_info", "set_account_id"),
        ("get_topic_info", "set_topic_id"),
        ("get_file_info", "set_file_id"),
        ("get_file_contents", "set_file_id"),
        ("get_contract_info", "set_contract_id"),
        ("get_contract_bytecode", "set_contract_id"),
        ("get_schedule_info", "set_schedule_id"),
        ("get_transaction_receipt", "set_transaction_id"),
    ],
)
async def test_each_query_targets_its_entity(fake_sdk, method: str, setter: str) -> None:
    info = await getattr(ConsensusInfoClient(object()), method)("0.0.42")
    assert info.query.calls == {setter: "id:0.0.42"}


@pytest.mark.asyncio
async def test_contract_call_query_sets_gas_and_function(fake_sdk) -> None:
    info = await ConsensusInfoClient(object()).get_contract_function_result("0.0.9", "getMessage")
    assert info.query.calls == {
        "set_contract_id": "id:0.0.9",
        "set_gas": consensus.CONTRACT_CALL_GAS,
        "set_function": "getMessage",
    }
