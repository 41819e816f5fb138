import gc

import pytest

from sdk_tck.rpc.request import PytestScope
from sdk_tck.rpc.session import SessionRegistry, find_suite_node, get_or_create_session_id, suite_label


class Scope:
    pass


def test_session_id_is_stable_within_a_file(request) -> None:
    first = get_or_create_session_id(request)
    assert get_or_create_session_id(request) == first
    assert get_or_create_session_id(request.node) == first
    assert get_or_create_session_id(PytestScope(request)) == first


def test_session_id_is_shared_by_tests_of_the_same_file(request) -> None:
    module = request.node.parent
    assert isinstance(module, pytest.Module)
    assert get_or_create_session_id(request) == get_or_create_session_id(module)


def test_session_id_is_labelled_with_the_module_nodeid(request) -> None:
    session_id = get_or_create_session_id(request)
    module = find_suite_node(request)
    assert session_id.startswith(f"{module.nodeid}::")
    assert len(session_id.rsplit("::", 1)[1]) == 12


def test_none_scope_uses_one_default_session() -> None:
    registry = SessionRegistry()
    assert registry.get_or_create_session_id(None) == registry.get_or_create_session_id(None)
    assert registry.get_or_create_session_id(None).startswith("global::")
    assert len(registry) == 0


def test_distinct_scopes_get_distinct_sessions() -> None:
    registry = SessionRegistry()
    first, second = Scope(), Scope()
    assert registry.get_or_create_session_id(first) != registry.get_or_create_session_id(second)
    assert registry.get_or_create_session_id(first) == registry.get_or_create_session_id(first)


def test_sessions_do_not_keep_scopes_alive() -> None:
    registry = SessionRegistry()
    scope = Scope()
    registry.get_or_create_session_id(scope)
    assert len(registry) == 1
    del scope
    gc.collect()
    assert len(registry) == 0


def test_plain_value_scopes_share_a_session_per_value() -> None:
    registry = SessionRegistry()

    first = registry.get_or_create_session_id("suite-a")

    assert registry.get_or_create_session_id("suite-a") == first
    assert registry.get_or_create_session_id("suite-b") != first
    assert registry.get_or_create_session_id(7) != first
    assert first.startswith("str::")
    assert len(registry) == 3


def test_unhashable_scope_is_rejected() -> None:
    registry = SessionRegistry()
    with pytest.raises(TypeError, match="must be hashable, got list"):
        registry.get_or_create_session_id(["suite"])


def test_find_suite_node_without_a_module_returns_none() -> None:
    assert find_suite_node(Scope()) is None
    assert suite_label(Scope()) == "Scope"


def test_session_isolation_across_files(pytester, monkeypatch, tmp_path) -> None:
    log = tmp_path / "sessions.log"
    monkeypatch.setenv("SESSION_LOG", str(log))
    body = """
import os

from sdk_tck.rpc.session import get_or_create_session_id


def _record(request):
    with open(os.environ["SESSION_LOG"], "a", encoding="utf-8") as fh:
        fh.write(get_or_create_session_id(request) + "\\n")


def test_first(request):
    _record(request)


def test_second(request):
    _record(request)
"""
    pytester.makepyfile(test_suite_one=body, test_suite_two=body)

    result = pytester.runpytest()

    result.assert_outcomes(passed=4)
    lines = log.read_text(encoding="utf-8").split()
    assert len(lines) == 4
    assert lines[0] == lines[1]
    assert lines[2] == lines[3]
    assert lines[0] != lines[2]
