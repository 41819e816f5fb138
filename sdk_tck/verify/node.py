"""Address book checks against the mirror network nodes endpoint."""

from __future__ import annotations

from typing import Any

from sdk_tck.utils.retry import with_retry

from .dual_source import DualSource, resolve_sources


def _find_node(data: dict[str, Any], node_id: int | str) -> dict[str, Any] | None:
    for node in data.get("nodes", []):
        if str(node.get("node_id")) == str(node_id):
            return node
    return None


async def verify_node_in_address_book(
    node_id: int | str,
    *,
    present: bool = True,
    description: str | None = None,
    sources: DualSource | None = None,
) -> None:
    """Assert ``node_id`` is (or is no longer) listed; optionally check its description."""
    sources = resolve_sources(sources)

    async def check_mirror() -> None:
        node = _find_node(await sources.mirror.get_network_nodes(node_id), node_id)
        if not present:
            assert node is None, f"mirror: node {node_id} still in address book"
            return
        assert node is not None, f"mirror: node {node_id} not in address book"
        if description is not None:
            assert node.get("description") == description, (
                f"mirror: node {node_id} description {node.get('description')!r}"
            )

    await with_retry(check_mirror, sources.retry)
