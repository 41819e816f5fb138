"""File checks. The mirror node has no file endpoint, so these read consensus only."""

from __future__ import annotations

from .dual_source import DualSource, resolve_sources, verify_dual_source
from .keys import normalize_hex, public_key_hex


async def verify_file_memo(file_id: str, memo: str, *, sources: DualSource | None = None) -> None:
    sources = resolve_sources(sources)

    async def consensus_read() -> str:
        return (await sources.consensus.get_file_info(file_id)).file_memo

    await verify_dual_source(memo, label=f"memo of {file_id}", consensus_read=consensus_read, mirror_read=None)


async def verify_file_keys(file_id: str, keys: list[str], *, sources: DualSource | None = None) -> None:
    """Assert the file's key list holds exactly ``keys`` (public keys, raw or DER hex), in order."""
    sources = resolve_sources(sources)
    info = await sources.consensus.get_file_info(file_id)
    actual = [public_key_hex(key) for key in info.keys or []]
    assert len(actual) == len(keys), f"consensus: {file_id} has {len(actual)} keys, expected {len(keys)}"
    for expected, raw in zip(keys, actual):
        assert normalize_hex(expected).endswith(raw), f"consensus: file key {raw} does not match {expected}"


async def verify_file_contents(file_id: str, contents: bytes | str, *, sources: DualSource | None = None) -> None:
    sources = resolve_sources(sources)
    expected = contents.encode("utf-8") if isinstance(contents, str) else contents

    async def consensus_read() -> bytes:
        return bytes(await sources.consensus.get_file_contents(file_id))

    await verify_dual_source(expected, label=f"contents of {file_id}", consensus_read=consensus_read, mirror_read=None)


async def verify_file_deleted(file_id: str, *, sources: DualSource | None = None) -> None:
    sources = resolve_sources(sources)

    async def consensus_read() -> bool:
        return bool((await sources.consensus.get_file_info(file_id)).is_deleted)

    await verify_dual_source(True, label=f"deleted flag of {file_id}", consensus_read=consensus_read, mirror_read=None)
