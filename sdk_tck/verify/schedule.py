"""Schedule checks."""

from __future__ import annotations

from .dual_source import DualSource, resolve_sources, verify_dual_source


async def verify_schedule_exists(schedule_id: str, *, sources: DualSource | None = None) -> None:
    sources = resolve_sources(sources)

    async def consensus_read() -> str | None:
        info = await sources.consensus.get_schedule_info(schedule_id)
        return str(info.schedule_id) if info.schedule_id is not None else None

    async def mirror_read() -> str | None:
        return (await sources.mirror.get_schedule_data(schedule_id)).get("schedule_id")

    await verify_dual_source(
        schedule_id,
        label=f"schedule {schedule_id}",
        consensus_read=consensus_read,
        mirror_read=mirror_read,
        retry=sources.retry,
    )

