"""Session ids: one per test file, so parallel suites keep isolated server-side clients."""

from __future__ import annotations

import threading
import uuid
import weakref
from typing import Any

import pytest
from loguru import logger


def find_suite_node(scope: Any) -> Any | None:
    """Walk up from ``scope`` to the file-level suite (``pytest.Module``).

    ``scope`` may be a node itself or anything exposing ``.node`` (the
    ``request`` fixture, ``PytestScope``). Returns None when no module is
    reachable, e.g. for session-scoped fixtures.
    """
    node = scope if isinstance(scope, (pytest.Item, pytest.Collector)) else getattr(scope, "node", None)
    while node is not None:
        if isinstance(node, pytest.Module):
            return node
        node = getattr(node, "parent", None)
    return None


def suite_label(key: Any) -> str:
    """Human-readable label for a cache key: the module nodeid or the scope's type name."""
    nodeid = getattr(key, "nodeid", None)
    if isinstance(nodeid, str) and nodeid:
        return nodeid
    return type(key).__name__


def _weakrefable(obj: Any) -> bool:
    try:
        weakref.ref(obj)
    except TypeError:
        return False
    return True


class SessionRegistry:
    """Maps a suite (or bare scope) to its session id without keeping it alive.

    Plain values such as strings or ints cannot be weakly referenced; they are
    held in a regular dict instead, so equal values share one session.
    """

    def __init__(self) -> None:
        self._sessions: weakref.WeakKeyDictionary[Any, str] = weakref.WeakKeyDictionary()
        self._pinned: dict[Any, str] = {}
        self._lock = threading.RLock()
        self._default: str | None = None

    def get_or_create_session_id(self, scope: Any) -> str:
        if scope is None:
            with self._lock:
                if self._default is None:
                    self._default = self._new_session_id("global")
                return self._default
        key = find_suite_node(scope)
        if key is None:
            key = scope
        sessions = self._sessions if _weakrefable(key) else self._pinned
        try:
            hash(key)
        except TypeError as exc:
            raise TypeError(f"Session scope must be hashable, got {type(key).__name__}") from exc
        with self._lock:
            session_id = sessions.get(key)
            if session_id is None:
                session_id = self._new_session_id(suite_label(key))
                sessions[key] = session_id
                logger.debug("New TCK session {} for {}", session_id, suite_label(key))
            return session_id

    def __len__(self) -> int:
        with self._lock:
            return len(self._sessions) + len(self._pinned)

    @staticmethod
    def _new_session_id(label: str) -> str:
        return f"{label}::{uuid.uuid4().hex[:12]}"


_registry = SessionRegistry()


def get_or_create_session_id(scope: Any) -> str:
    """Session id shared by every call made from the same test file."""
    return _registry.get_or_create_session_id(scope)
