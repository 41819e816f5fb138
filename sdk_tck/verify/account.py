"""Account checks: balances, NFTs, allowances, airdrops, associations, memo, deletion."""

from __future__ import annotations

from typing import Any

from sdk_tck.utils.retry import with_retry

from .dual_source import DualSource, resolve_sources, verify_dual_source


def _same(value: Any, expected: Any) -> bool:
    return str(value) == str(expected)


def _token_balance(balance: Any, token_id: str) -> int | None:
    for key, amount in (balance.token_balances or {}).items():
        if str(key) == token_id:
            return int(amount)
    return None


async def verify_hbar_balance(account_id: str, tinybars: int | str, *, sources: DualSource | None = None) -> None:
    """Assert the account holds ``tinybars`` on both sources."""
    sources = resolve_sources(sources)

    async def consensus_read() -> int:
        balance = await sources.consensus.get_balance(account_id)
        return int(balance.hbars.to_tinybars())

    async def mirror_read() -> int:
        data = await sources.mirror.get_account_data(account_id)
        return int(data["balance"]["balance"])

    await verify_dual_source(
        int(tinybars),
        label=f"hbar balance of {account_id}",
        consensus_read=consensus_read,
        mirror_read=mirror_read,
        retry=sources.retry,
    )


async def verify_token_balance(
    account_id: str,
    token_id: str,
    amount: int | str,
    *,
    sources: DualSource | None = None,
) -> None:
    sources = resolve_sources(sources)

    async def consensus_read() -> int | None:
        return _token_balance(await sources.consensus.get_balance(account_id), token_id)

    async def mirror_read() -> int | None:
        data = await sources.mirror.get_token_relationships(account_id, token_id)
        for relationship in data.get("tokens", []):
            if relationship.get("token_id") == token_id:
                return int(relationship["balance"])
        return None

    await verify_dual_source(
        int(amount),
        label=f"{token_id} balance of {account_id}",
        consensus_read=consensus_read,
        mirror_read=mirror_read,
        retry=sources.retry,
    )


async def verify_nft_ownership(
    account_id: str,
    token_id: str,
    serial_number: int | str,
    *,
    owned: bool = True,
    sources: DualSource | None = None,
) -> None:
    """Assert whether ``account_id`` owns NFT ``token_id/serial_number``."""
    sources = resolve_sources(sources)

    nft_info = await sources.consensus.get_token_nft_info(token_id, serial_number)
    owner = str(nft_info.account_id)
    if owned:
        assert owner == account_id, f"consensus: NFT {token_id}/{serial_number} owned by {owner}"
    else:
        assert owner != account_id, f"consensus: NFT {token_id}/{serial_number} still owned by {account_id}"

    async def check_mirror() -> None:
        data = await sources.mirror.get_account_nfts(account_id, token_id)
        found = any(
            nft.get("token_id") == token_id and _same(nft.get("serial_number"), serial_number)
            for nft in data.get("nfts", [])
        )
        assert found is owned, f"mirror: NFT {token_id}/{serial_number} owned={found}, expected {owned}"

    await with_retry(check_mirror, sources.retry)


async def verify_hbar_allowance(
    owner_account_id: str,
    spender_account_id: str,
    amount: int | str,
    *,
    sources: DualSource | None = None,
) -> None:
    sources = resolve_sources(sources)

    async def check_mirror() -> None:
        data = await sources.mirror.get_hbar_allowances(owner_account_id)
        found = any(
            allowance.get("owner") == owner_account_id
            and allowance.get("spender") == spender_account_id
            and _same(allowance.get("amount"), amount)
            for allowance in data.get("allowances", [])
        )
        assert found, f"mirror: no hbar allowance {owner_account_id} -> {spender_account_id} of {amount}"

    await with_retry(check_mirror, sources.retry)


async def verify_token_allowance(
    owner_account_id: str,
    spender_account_id: str,
    token_id: str,
    amount: int | str,
    *,
    sources: DualSource | None = None,
) -> None:
    sources = resolve_sources(sources)

    async def check_mirror() -> None:
        data = await sources.mirror.get_token_allowances(owner_account_id)
        found = any(
            allowance.get("owner") == owner_account_id
            and allowance.get("spender") == spender_account_id
            and allowance.get("token_id") == token_id
            and _same(allowance.get("amount"), amount)
            for allowance in data.get("allowances", [])
        )
        assert found, f"mirror: no {token_id} allowance {owner_account_id} -> {spender_account_id} of {amount}"

    await with_retry(check_mirror, sources.retry)


async def verify_nft_allowance(
    allowance_exists: bool,
    owner_account_id: str,
    spender_account_id: str,
    token_id: str,
    serial_number: int | str,
    delegating_spender_account_id: str | None = None,
    *,
    sources: DualSource | None = None,
) -> None:
    """Assert whether a spender is approved for a single NFT serial."""
    sources = resolve_sources(sources)

    async def check_mirror() -> None:
        data = await sources.mirror.get_account_nfts(owner_account_id, token_id)
        found = any(
            nft.get("account_id") == owner_account_id
            and nft.get("spender") == spender_account_id
            and nft.get("token_id") == token_id
            and _same(nft.get("serial_number"), serial_number)
            and (
                delegating_spender_account_id is None
                or nft.get("delegating_spender") == delegating_spender_account_id
            )
            for nft in data.get("nfts", [])
        )
        assert found is allowance_exists, (
            f"mirror: NFT allowance {token_id}/{serial_number} for {spender_account_id} "
            f"exists={found}, expected {allowance_exists}"
        )

    await with_retry(check_mirror, sources.retry)


async def verify_approved_for_all_allowance(
    approved_for_all: bool,
    owner_account_id: str,
    spender_account_id: str,
    token_id: str,
    *,
    sources: DualSource | None = None,
) -> None:
    sources = resolve_sources(sources)

    async def check_mirror() -> None:
        data = await sources.mirror.get_nft_allowances(owner_account_id)
        found = any(
            allowance.get("token_id") == token_id
            and allowance.get("owner") == owner_account_id
            and allowance.get("spender") == spender_account_id
            for allowance in data.get("allowances", [])
        )
        assert found is approved_for_all, (
            f"mirror: approved-for-all on {token_id} for {spender_account_id} "
            f"is {found}, expected {approved_for_all}"
        )

    await with_retry(check_mirror, sources.retry)


async def verify_token_association(
    account_id: str,
    token_id: str,
    *,
    associated: bool = True,
    sources: DualSource | None = None,
) -> None:
    """Assert whether ``token_id`` is associated with ``account_id``."""
    sources = resolve_sources(sources)

    info = await sources.consensus.get_account_info(account_id)
    on_consensus = any(str(rel.token_id) == token_id for rel in info.token_relationships or [])
    assert on_consensus is associated, (
        f"consensus: {token_id} associated with {account_id} is {on_consensus}, expected {associated}"
    )

    async def check_mirror() -> None:
        data = await sources.mirror.get_token_relationships(account_id, token_id)
        on_mirror = any(rel.get("token_id") == token_id for rel in data.get("tokens", []))
        assert on_mirror is associated, (
            f"mirror: {token_id} associated with {account_id} is {on_mirror}, expected {associated}"
        )

    await with_retry(check_mirror, sources.retry)


async def verify_no_token_associations(account_id: str, *, sources: DualSource | None = None) -> None:
    sources = resolve_sources(sources)

    info = await sources.consensus.get_account_info(account_id)
    assert not info.token_relationships, f"consensus: {account_id} has token relationships"

    async def check_mirror() -> None:
        data = await sources.mirror.get_token_relationships(account_id)
        assert not data.get("tokens"), f"mirror: {account_id} has token relationships"

    await with_retry(check_mirror, sources.retry)


async def verify_account_memo(account_id: str, memo: str, *, sources: DualSource | None = None) -> None:
    sources = resolve_sources(sources)

    async def consensus_read() -> str:
        return (await sources.consensus.get_account_info(account_id)).account_memo

    async def mirror_read() -> str:
        return (await sources.mirror.get_account_data(account_id)).get("memo")

    await verify_dual_source(
        memo,
        label=f"memo of {account_id}",
        consensus_read=consensus_read,
        mirror_read=mirror_read,
        retry=sources.retry,
    )


async def verify_account_deleted(account_id: str, *, sources: DualSource | None = None) -> None:
    """Assert the mirror node marks ``account_id`` deleted.

    Consensus nodes answer info queries for deleted accounts with
    ``ACCOUNT_DELETED``, which the suites check through the server under test.
    """
    sources = resolve_sources(sources)

    async def mirror_read() -> bool:
        return bool((await sources.mirror.get_account_data(account_id)).get("deleted"))

    await verify_dual_source(
        True,
        label=f"deleted flag of {account_id}",
        consensus_read=None,
        mirror_read=mirror_read,
        retry=sources.retry,
    )


async def verify_airdrop(
    sender_account_id: str,
    receiver_account_id: str,
    token_id: str,
    amount: int | str,
    *,
    sources: DualSource | None = None,
) -> None:
    """Assert a pending airdrop shows as outstanding for the sender and pending for the receiver.

    Mirror only (REST Java API); consensus has no pending-airdrop query.
    """
    sources = resolve_sources(sources)

    def matches(airdrop: dict[str, Any]) -> bool:
        return (
            airdrop.get("sender_id") == sender_account_id
            and airdrop.get("receiver_id") == receiver_account_id
            and airdrop.get("token_id") == token_id
            and _same(airdrop.get("amount"), amount)
        )

    async def check_mirror() -> None:
        outgoing = await sources.mirror.get_outgoing_token_airdrops(sender_account_id)
        assert any(matches(a) for a in outgoing.get("airdrops") or []), (
            f"mirror: no outstanding airdrop of {amount} {token_id} from {sender_account_id}"
        )
        incoming = await sources.mirror.get_incoming_token_airdrops(receiver_account_id)
        assert any(matches(a) for a in incoming.get("airdrops") or []), (
            f"mirror: no pending airdrop of {amount} {token_id} for {receiver_account_id}"
        )

    await with_retry(check_mirror, sources.retry)
