"""Per-run loguru log files shared by ``sdk-tck run`` and the pytest child it starts.

The CLI picks the file from the suite and network and exports it as
``SDK_TCK_LOG_FILE``; the pytest plugin attaches a sink to the same file, so
one run's JSON-RPC traffic and verifier output land next to the CLI's lines.
"""

from __future__ import annotations

import os
from pathlib import Path

from loguru import logger

LOG_FILE_ENV = "SDK_TCK_LOG_FILE"

_SINK_IDS: dict[str, int] = {}


def get_log_dir() -> Path:
    return Path.home() / ".sdk_tck" / "logs"


def run_log_path(test: str, network: str) -> Path:
    return get_log_dir() / f"{network}-{test.lower()}.log"


def ensure_rotating_log_file(log_path: Path, level: str = "INFO") -> Path:
    """Add a rotating sink for ``log_path`` unless this process already has one."""
    key = str(log_path)
    if key in _SINK_IDS:
        return log_path
    log_path.parent.mkdir(parents=True, exist_ok=True)
    _SINK_IDS[key] = logger.add(
        key,
        level=level,
        rotation="10 MB",
        retention="14 days",
        enqueue=True,
        encoding="utf-8",
        backtrace=False,
        diagnose=False,
    )
    return log_path


def attach_run_log(level: str = "DEBUG") -> Path | None:
    """Log into the file exported by the parent ``sdk-tck run``, if any."""
    configured = os.environ.get(LOG_FILE_ENV)
    if not configured:
        return None
    return ensure_rotating_log_file(Path(configured), level=level)
