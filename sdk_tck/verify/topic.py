"""Topic checks."""

from __future__ import annotations

from .dual_source import DualSource, resolve_sources, verify_dual_source


async def verify_topic_memo(topic_id: str, memo: str, *, sources: DualSource | None = None) -> None:
    sources = resolve_sources(sources)

    async def consensus_read() -> str:
        return (await sources.consensus.get_topic_info(topic_id)).memo

    async def mirror_read() -> str:
        return (await sources.mirror.get_topic_data(topic_id)).get("memo")

    await verify_dual_source(
        memo,
        label=f"memo of {topic_id}",
        consensus_read=consensus_read,
        mirror_read=mirror_read,
        retry=sources.retry,
    )


async def verify_topic_deleted(topic_id: str, *, sources: DualSource | None = None) -> None:
    # Consensus answers INVALID_TOPIC_ID for deleted topics, so only the mirror flag is read.
    sources = resolve_sources(sources)

    async def mirror_read() -> bool:
        return bool((await sources.mirror.get_topic_data(topic_id)).get("deleted"))

    await verify_dual_source(
        True,
        label=f"deleted flag of {topic_id}",
        consensus_read=None,
        mirror_read=mirror_read,
        retry=sources.retry,
    )
