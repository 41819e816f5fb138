"""Shared plumbing for checks that read one fact from both consensus and mirror."""

from __future__ import annotations

import threading
from collections.abc import Awaitable, Callable
from dataclasses import dataclass, field
from typing import Any

from sdk_tck.config.access import get_settings
from sdk_tck.services.consensus import ConsensusInfoClient
from sdk_tck.services.mirror import MirrorNodeClient
from sdk_tck.utils.naming import consensus_to_mirror_name
from sdk_tck.utils.retry import RetryPolicy, with_retry


@dataclass(slots=True)
class DualSource:
    """The two read paths plus the retry policy applied to mirror checks."""

    consensus: ConsensusInfoClient
    mirror: MirrorNodeClient
    retry: RetryPolicy = field(default_factory=RetryPolicy)


_sources_lock = threading.RLock()
_sources: DualSource | None = None


def get_default_sources() -> DualSource:
    global _sources
    with _sources_lock:
        if _sources is None:
            settings = get_settings()
            _sources = DualSource(
                consensus=ConsensusInfoClient.from_settings(settings),
                mirror=MirrorNodeClient.from_settings(settings),
            )
        return _sources


def set_default_sources(sources: DualSource | None) -> None:
    global _sources
    with _sources_lock:
        _sources = sources


def resolve_sources(sources: DualSource | None) -> DualSource:
    return sources if sources is not None else get_default_sources()


def consensus_attr(info: Any, name: str) -> Any:
    """Read a camelCase field (``adminKey``) from an SDK info object (``admin_key``)."""
    return getattr(info, consensus_to_mirror_name(name))



def assert_source_value(source: str, label: str, expected: Any, actual: Any) -> None:
    if expected is None:
        assert actual is None, f"{source}: expected {label} to be None, got {actual!r}"
    else:
        assert actual == expected, f"{source}: expected {label} == {expected!r}, got {actual!r}"


def status_name(value: Any) -> str | None:
    """Normalize SDK enums, bools and mirror strings to an upper-case status name."""
    if value is None:
        return None
    name = getattr(value, "name", value)
    return str(name).upper()


async def verify_dual_source(
    expected: Any,
    *,
    label: str,
    consensus_read: Callable[[], Awaitable[Any]] | None,
    mirror_read: Callable[[], Awaitable[Any]] | None,
    retry: RetryPolicy | None = None,
) -> None:
    """Assert both sources report ``expected`` for one fact.

    The consensus value is read once. The mirror value is read under the
    retry policy because the mirror node lags behind consensus. Either reader
    may be None where that source does not expose the fact.
    """
    if consensus_read is not None:
        assert_source_value("consensus", label, expected, await consensus_read())

    if mirror_read is not None:
        async def check_mirror() -> None:
            assert_source_value("mirror", label, expected, await mirror_read())

        await with_retry(check_mirror, retry or RetryPolicy())
