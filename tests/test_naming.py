import pytest

from sdk_tck.utils.naming import consensus_to_mirror_name, to_env_format


@pytest.mark.parametrize(
    ("name", "expected"),
    [
        ("feeScheduleKey", "fee_schedule_key"),
        ("adminKey", "admin_key"),
        ("pauseKey", "pause_key"),
        ("key", "key"),
        ("fee_schedule_key", "fee_schedule_key"),
    ],
)
def test_consensus_to_mirror_name(name: str, expected: str) -> None:
    assert consensus_to_mirror_name(name) == expected
    assert consensus_to_mirror_name(expected) == expected


def test_to_env_format() -> None:
    assert to_env_format("mirrorNodeRestUrl") == "MIRROR_NODE_REST_URL"
    assert to_env_format("jsonRpcServerUrl") == "JSON_RPC_SERVER_URL"
