"""Token checks: deletion, pause, freeze and KYC status, names, expiry and burns."""

from __future__ import annotations

from typing import Any

from loguru import logger

from sdk_tck.utils.retry import with_retry

from .account import verify_token_balance
from .dual_source import DualSource, resolve_sources, status_name, verify_dual_source

NANOS_PER_SECOND = 1_000_000_000


async def verify_token_deleted(token_id: str, *, sources: DualSource | None = None) -> None:
    sources = resolve_sources(sources)

    async def consensus_read() -> bool:
        return bool((await sources.consensus.get_token_info(token_id)).is_deleted)

    async def mirror_read() -> bool:
        return bool((await sources.mirror.get_token_data(token_id)).get("deleted"))

    await verify_dual_source(
        True,
        label=f"deleted flag of {token_id}",
        consensus_read=consensus_read,
        mirror_read=mirror_read,
        retry=sources.retry,
    )


async def verify_token_pause_status(
    token_id: str,
    paused: bool,
    *,
    sources: DualSource | None = None,
) -> None:
    """Assert ``PAUSED`` (or ``UNPAUSED``) on both sources."""
    sources = resolve_sources(sources)
    expected = "PAUSED" if paused else "UNPAUSED"

    async def consensus_read() -> str | None:
        status = (await sources.consensus.get_token_info(token_id)).pause_status
        if isinstance(status, bool):
            return "PAUSED" if status else "UNPAUSED"
        return status_name(status)

    async def mirror_read() -> str | None:
        return status_name((await sources.mirror.get_token_data(token_id)).get("pause_status"))

    await verify_dual_source(
        expected,
        label=f"pause status of {token_id}",
        consensus_read=consensus_read,
        mirror_read=mirror_read,
        retry=sources.retry,
    )


async def _relationship_status(
    sources: DualSource, account_id: str, token_id: str, field_name: str
) -> str | None:
    data = await sources.mirror.get_token_relationships(account_id, token_id)
    for relationship in data.get("tokens", []):
        if relationship.get("token_id") == token_id:
            return status_name(relationship.get(field_name))
    raise AssertionError(f"mirror: {token_id} not found on {account_id}")


async def verify_token_freeze_status(
    account_id: str,
    token_id: str,
    frozen: bool,
    *,
    sources: DualSource | None = None,
) -> None:
    """Assert ``FROZEN``/``UNFROZEN`` on the mirror token relationship.

    Consensus nodes do not expose relationship status through queries.
    """
    sources = resolve_sources(sources)
    expected = "FROZEN" if frozen else "UNFROZEN"

    async def check_mirror() -> None:
        status = await _relationship_status(sources, account_id, token_id, "freeze_status")
        assert status == expected, f"mirror: freeze status of {token_id} on {account_id} is {status}"

    await with_retry(check_mirror, sources.retry)


async def verify_token_kyc_status(
    account_id: str,
    token_id: str,
    granted: bool,
    *,
    sources: DualSource | None = None,
) -> None:
    sources = resolve_sources(sources)
    expected = "GRANTED" if granted else "REVOKED"

    async def check_mirror() -> None:
        status = await _relationship_status(sources, account_id, token_id, "kyc_status")
        assert status == expected, f"mirror: kyc status of {token_id} on {account_id} is {status}"

    await with_retry(check_mirror, sources.retry)


async def verify_token_field(
    token_id: str,
    field_name: str,
    expected: Any,
    *,
    sources: DualSource | None = None,
) -> None:
    """Compare a plain token field (``name``, ``symbol``, ``memo``) on both sources."""
    sources = resolve_sources(sources)

    async def consensus_read() -> Any:
        return getattr(await sources.consensus.get_token_info(token_id), field_name)

    async def mirror_read() -> Any:
        return (await sources.mirror.get_token_data(token_id)).get(field_name)

    await verify_dual_source(
        expected,
        label=f"{field_name} of {token_id}",
        consensus_read=consensus_read,
        mirror_read=mirror_read,
        retry=sources.retry,
    )


async def verify_token_expiration_time(
    token_id: str,
    expiration_seconds: int | str,
    *,
    sources: DualSource | None = None,
) -> None:
    """Assert the expiry (epoch seconds); the mirror reports nanoseconds."""
    sources = resolve_sources(sources)

    async def consensus_read() -> int:
        expiry = (await sources.consensus.get_token_info(token_id)).expiry
        return int(getattr(expiry, "seconds", expiry))

    async def mirror_read() -> int:
        nanos = (await sources.mirror.get_token_data(token_id)).get("expiry_timestamp")
        return int(nanos) // NANOS_PER_SECOND

    await verify_dual_source(
        int(expiration_seconds),
        label=f"expiry of {token_id}",
        consensus_read=consensus_read,
        mirror_read=mirror_read,
        retry=sources.retry,
    )


async def verify_fungible_token_burn(
    token_id: str,
    treasury_account_id: str,
    initial_supply: int | str,
    amount: int | str,
    *,
    sources: DualSource | None = None,
) -> None:
    """Assert the treasury holds ``initial_supply - amount`` after a burn."""
    await verify_token_balance(
        treasury_account_id,
        token_id,
        int(initial_supply) - int(amount),
        sources=sources,
    )


async def verify_non_fungible_token_burn(
    token_id: str,
    treasury_account_id: str,
    serial_number: int | str,
    *,
    sources: DualSource | None = None,
) -> None:
    """Assert NFT ``token_id/serial_number`` no longer exists.

    Consensus must reject the NFT info query; the mirror must stop listing the
    serial under the treasury.
    """
    sources = resolve_sources(sources)
    try:
        await sources.consensus.get_token_nft_info(token_id, serial_number)
    except Exception as exc:
        logger.debug("NFT {}/{} info query failed as expected: {!r}", token_id, serial_number, exc)
    else:
        raise AssertionError(f"consensus: burned NFT {token_id}/{serial_number} still exists")

    async def check_mirror() -> None:
        data = await sources.mirror.get_account_nfts(treasury_account_id, token_id)
        found = any(
            nft.get("token_id") == token_id and str(nft.get("serial_number")) == str(serial_number)
            for nft in data.get("nfts", [])
        )
        assert not found, f"mirror: burned NFT {token_id}/{serial_number} still listed on {treasury_account_id}"

    await with_retry(check_mirror, sources.retry)
