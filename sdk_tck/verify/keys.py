"""Key checks for accounts, tokens, topics and contracts.

Keys are compared as hex suffixes: a DER-encoded public key ends with the
raw key bytes, and an encoded ``Key`` protobuf ends with its inner key list.
"""

from __future__ import annotations

from typing import Any

from sdk_tck.utils.naming import consensus_to_mirror_name
from sdk_tck.utils.retry import with_retry

from .dual_source import DualSource, consensus_attr, resolve_sources

# entity -> (consensus query, mirror lookup)
ENTITY_READERS: dict[str, tuple[str, str]] = {
    "account": ("get_account_info", "get_account_data"),
    "token": ("get_token_info", "get_token_data"),
    "topic": ("get_topic_info", "get_topic_data"),
    "contract": ("get_contract_info", "get_contract_data"),
}


def normalize_hex(value: str) -> str:
    value = value.strip().lower()
    return value[2:] if value.startswith("0x") else value


def public_key_hex(key: Any) -> str:
    """Raw public key bytes of an SDK key as lowercase hex."""
    return key.to_bytes_raw().hex()


def key_list_hex(key: Any) -> str:
    """Encoded ``KeyList`` (or ``ThresholdKey``) carried inside an SDK key."""
    proto = key._to_proto()
    if proto.HasField("thresholdKey"):
        return proto.thresholdKey.SerializeToString().hex()
    return proto.keyList.SerializeToString().hex()


def mirror_key_hex(mirror_key: Any) -> str | None:
    """Hex of a mirror ``{"_type": ..., "key": ...}`` object, None when absent."""
    if mirror_key is None:
        return None
    return normalize_hex(mirror_key["key"])


def _readers(entity: str) -> tuple[str, str]:
    try:
        return ENTITY_READERS[entity]
    except KeyError as exc:
        raise ValueError(f"unsupported entity for key checks: {entity}") from exc


async def _consensus_key(sources: DualSource, entity: str, entity_id: str, key_type: str) -> Any:
    consensus_method, _ = _readers(entity)
    info = await getattr(sources.consensus, consensus_method)(entity_id)
    return consensus_attr(info, key_type)


async def _mirror_key(sources: DualSource, entity: str, entity_id: str, key_type: str) -> Any:
    _, mirror_method = _readers(entity)
    data = await getattr(sources.mirror, mirror_method)(entity_id)
    return data.get(consensus_to_mirror_name(key_type))


async def verify_key(
    entity: str,
    entity_id: str,
    key: str,
    key_type: str,
    *,
    sources: DualSource | None = None,
) -> None:
    """Assert ``entity_id`` carries public key ``key`` (raw or DER hex) as ``key_type``."""
    sources = resolve_sources(sources)
    expected = normalize_hex(key)

    consensus_key = await _consensus_key(sources, entity, entity_id, key_type)
    assert consensus_key is not None, f"consensus: {entity} {entity_id} has no {key_type}"
    raw = public_key_hex(consensus_key)
    assert expected.endswith(raw), f"consensus: {key_type} {raw} does not match {expected}"

    async def check_mirror() -> None:
        mirror_hex = mirror_key_hex(await _mirror_key(sources, entity, entity_id, key_type))
        assert mirror_hex is not None, f"mirror: {entity} {entity_id} has no {key_type}"
        assert expected.endswith(mirror_hex), f"mirror: {key_type} {mirror_hex} does not match {expected}"

    await with_retry(check_mirror, sources.retry)


async def verify_key_list(
    entity: str,
    entity_id: str,
    key: str,
    key_type: str,
    *,
    sources: DualSource | None = None,
) -> None:
    """Assert ``entity_id`` carries the key list or threshold key encoded as ``key``."""
    sources = resolve_sources(sources)
    expected = normalize_hex(key)

    consensus_key = await _consensus_key(sources, entity, entity_id, key_type)
    assert consensus_key is not None, f"consensus: {entity} {entity_id} has no {key_type}"
    encoded = key_list_hex(consensus_key)
    assert expected.endswith(encoded), f"consensus: {key_type} {encoded} does not match {expected}"

    async def check_mirror() -> None:
        mirror_hex = mirror_key_hex(await _mirror_key(sources, entity, entity_id, key_type))
        assert mirror_hex is not None, f"mirror: {entity} {entity_id} has no {key_type}"
        assert mirror_hex.endswith(expected), f"mirror: {key_type} {mirror_hex} does not match {expected}"

    await with_retry(check_mirror, sources.retry)


async def verify_null_key(
    entity: str,
    entity_id: str,
    key_type: str,
    *,
    sources: DualSource | None = None,
) -> None:
    """Assert neither source reports a ``key_type`` for ``entity_id``."""
    sources = resolve_sources(sources)

    consensus_key = await _consensus_key(sources, entity, entity_id, key_type)
    assert consensus_key is None, f"consensus: expected no {key_type}, got {consensus_key!r}"

    async def check_mirror() -> None:
        mirror_key = await _mirror_key(sources, entity, entity_id, key_type)
        assert mirror_key is None, f"mirror: expected no {key_type}, got {mirror_key!r}"

    await with_retry(check_mirror, sources.retry)
