"""Field-name bridge between the JSON-RPC (camelCase) and mirror/SDK (snake_case) vocabularies."""

from __future__ import annotations

import re

_LOWER_UPPER = re.compile(r"([a-z])([A-Z])")


def consensus_to_mirror_name(name: str) -> str:
    """Convert ``feeScheduleKey`` to ``fee_schedule_key``.

    Only a lowercase letter followed by an uppercase letter gets an
    underscore; already snake_case input comes back unchanged.
    """
    return _LOWER_UPPER.sub(r"\1_\2", name).lower()


def to_env_format(name: str) -> str:
    """Convert ``mirrorNodeRestUrl`` to ``MIRROR_NODE_REST_URL``."""
    return consensus_to_mirror_name(name).upper()

