"""Custom fee checks: a token's fee schedule holds a matching fixed, fractional or royalty fee.

Consensus reports ``TokenInfo.custom_fees`` as SDK fee objects; the mirror
groups them under ``custom_fees.fixed_fees`` / ``fractional_fees`` /
``royalty_fees``. Amounts are compared as decimal strings.
"""

from __future__ import annotations

from typing import Any, Callable

import hiero_sdk_python as hiero

from sdk_tck.utils.retry import with_retry

from .dual_source import DualSource, resolve_sources, status_name

EXCLUSIVE = "exclusive"


def _same(value: Any, expected: Any) -> bool:
    # Unset bounds arrive as None on the mirror and 0 on consensus.
    return str(value if value is not None else 0) == str(expected)


def _collector_matches(fee: Any, collector: str, exempt: bool) -> bool:
    return str(fee.fee_collector_account_id) == collector and bool(fee.all_collectors_are_exempt) == exempt


def _mirror_collector_matches(fee: dict[str, Any], collector: str, exempt: bool) -> bool:
    return fee.get("collector_account_id") == collector and bool(fee.get("all_collectors_are_exempt")) == exempt


async def _verify_fee(
    token_id: str,
    label: str,
    *,
    fee_type: str,
    mirror_group: str,
    consensus_match: Callable[[Any], bool],
    mirror_match: Callable[[dict[str, Any]], bool],
    sources: DualSource | None,
) -> None:
    sources = resolve_sources(sources)
    fee_class = getattr(hiero, fee_type)

    info = await sources.consensus.get_token_info(token_id)
    found = any(isinstance(fee, fee_class) and consensus_match(fee) for fee in info.custom_fees or [])
    assert found, f"consensus: no {label} on {token_id}"

    async def check_mirror() -> None:
        data = await sources.mirror.get_token_data(token_id)
        fees = (data.get("custom_fees") or {}).get(mirror_group) or []
        assert any(mirror_match(fee) for fee in fees), f"mirror: no {label} on {token_id}"

    await with_retry(check_mirror, sources.retry)


async def verify_token_fixed_fee(
    token_id: str,
    fee_collector_account_id: str,
    fee_collectors_exempt: bool,
    amount: int | str,
    *,
    sources: DualSource | None = None,
) -> None:
    await _verify_fee(
        token_id,
        f"fixed fee of {amount} to {fee_collector_account_id}",
        fee_type="CustomFixedFee",
        mirror_group="fixed_fees",
        consensus_match=lambda fee: (
            _collector_matches(fee, fee_collector_account_id, fee_collectors_exempt) and _same(fee.amount, amount)
        ),
        mirror_match=lambda fee: (
            _mirror_collector_matches(fee, fee_collector_account_id, fee_collectors_exempt)
            and _same(fee.get("amount"), amount)
        ),
        sources=sources,
    )


async def verify_token_fractional_fee(
    token_id: str,
    fee_collector_account_id: str,
    fee_collectors_exempt: bool,
    numerator: int | str,
    denominator: int | str,
    min_amount: int | str,
    max_amount: int | str,
    assessment_method: str,
    *,
    sources: DualSource | None = None,
) -> None:
    """Fractional fee; ``assessment_method`` is ``inclusive`` or ``exclusive``."""
    method = assessment_method.lower()

    def consensus_match(fee: Any) -> bool:
        return (
            _collector_matches(fee, fee_collector_account_id, fee_collectors_exempt)
            and _same(fee.numerator, numerator)
            and _same(fee.denominator, denominator)
            and _same(fee.min_amount, min_amount)
            and _same(fee.max_amount, max_amount)
            and (status_name(fee.assessment_method) or "").lower() == method
        )

    def mirror_match(fee: dict[str, Any]) -> bool:
        fraction = fee.get("amount") or {}
        return (
            _mirror_collector_matches(fee, fee_collector_account_id, fee_collectors_exempt)
            and _same(fraction.get("numerator"), numerator)
            and _same(fraction.get("denominator"), denominator)
            and _same(fee.get("minimum"), min_amount)
            and _same(fee.get("maximum"), max_amount)
            and bool(fee.get("net_of_transfers")) == (method == EXCLUSIVE)
        )

    await _verify_fee(
        token_id,
        f"fractional fee {numerator}/{denominator} to {fee_collector_account_id}",
        fee_type="CustomFractionalFee",
        mirror_group="fractional_fees",
        consensus_match=consensus_match,
        mirror_match=mirror_match,
        sources=sources,
    )


async def verify_token_royalty_fee(
    token_id: str,
    fee_collector_account_id: str,
    fee_collectors_exempt: bool,
    numerator: int | str,
    denominator: int | str,
    fallback_amount: int | str | None = None,
    *,
    sources: DualSource | None = None,
) -> None:
    def fallback_matches(fallback: Any) -> bool:
        if fallback_amount is None:
            return fallback is None
        return fallback is not None and _same(fallback, fallback_amount)

    def consensus_match(fee: Any) -> bool:
        fallback = fee.fallback_fee.amount if fee.fallback_fee is not None else None
        return (
            _collector_matches(fee, fee_collector_account_id, fee_collectors_exempt)
            and _same(fee.numerator, numerator)
            and _same(fee.denominator, denominator)
            and fallback_matches(fallback)
        )

    def mirror_match(fee: dict[str, Any]) -> bool:
        fraction = fee.get("amount") or {}
        fallback = (fee.get("fallback_fee") or {}).get("amount")
        return (
            _mirror_collector_matches(fee, fee_collector_account_id, fee_collectors_exempt)
            and _same(fraction.get("numerator"), numerator)
            and _same(fraction.get("denominator"), denominator)
            and fallback_matches(fallback)
        )

    await _verify_fee(
        token_id,
        f"royalty fee {numerator}/{denominator} to {fee_collector_account_id}",
        fee_type="CustomRoyaltyFee",
        mirror_group="royalty_fees",
        consensus_match=consensus_match,
        mirror_match=mirror_match,
        sources=sources,
    )
