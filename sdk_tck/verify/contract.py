"""Contract checks."""

from __future__ import annotations

from .dual_source import DualSource, resolve_sources, verify_dual_source
from .keys import normalize_hex, verify_null_key


async def verify_contract_memo(contract_id: str, memo: str, *, sources: DualSource | None = None) -> None:
    sources = resolve_sources(sources)

    async def consensus_read() -> str:
        return (await sources.consensus.get_contract_info(contract_id)).contract_memo

    async def mirror_read() -> str:
        return (await sources.mirror.get_contract_data(contract_id)).get("memo")

    await verify_dual_source(
        memo,
        label=f"memo of {contract_id}",
        consensus_read=consensus_read,
        mirror_read=mirror_read,
        retry=sources.retry,
    )


async def verify_contract_admin_key_null(contract_id: str, *, sources: DualSource | None = None) -> None:
    await verify_null_key("contract", contract_id, "adminKey", sources=sources)


async def verify_contract_bytecode(
    contract_id: str,
    bytecode: str,
    *,
    sources: DualSource | None = None,
) -> None:
    """Assert the deployed runtime bytecode (hex, with or without ``0x``)."""
    sources = resolve_sources(sources)

    async def consensus_read() -> str:
        return (await sources.consensus.get_contract_bytecode(contract_id)).hex()

    async def mirror_read() -> str | None:
        runtime = (await sources.mirror.get_contract_data(contract_id)).get("runtime_bytecode")
        return normalize_hex(runtime) if runtime is not None else None

    await verify_dual_source(
        normalize_hex(bytecode),
        label=f"runtime bytecode of {contract_id}",
        consensus_read=consensus_read,
        mirror_read=mirror_read,
        retry=sources.retry,
    )


async def verify_contract_function_result(
    contract_id: str,
    function_name: str,
    expected: str,
    *,
    sources: DualSource | None = None,
) -> None:
    """Call a no-argument view function returning ``string`` and compare its value.

    Consensus only: the mirror node does not execute local calls.
    """
    sources = resolve_sources(sources)
    result = await sources.consensus.get_contract_function_result(contract_id, function_name)
    actual = result.get_string(0)
    assert actual == expected, f"consensus: {function_name}() of {contract_id} returned {actual!r}"
