import os
from types import SimpleNamespace

import pytest
from loguru import logger
from typer.testing import CliRunner

from sdk_tck import __version__
from sdk_tck.cli import commands
from sdk_tck.cli.shared import logging_utils
from sdk_tck.cli.test_paths import ALL_TESTS, TEST_CONFIGURATIONS, resolve_test_path

runner = CliRunner()


@pytest.fixture
def launched(monkeypatch, tmp_path) -> list[list[str]]:
    """Capture pytest launches instead of running them."""
    commands_run: list[list[str]] = []

    def fake_run(command, env=None, check=False):
        commands_run.append(command)
        return SimpleNamespace(returncode=0)

    monkeypatch.setattr(commands.subprocess, "run", fake_run)
    monkeypatch.setattr(commands, "ensure_rotating_log_file", lambda path: tmp_path / path.name)
    return commands_run


def test_all_runs_every_suite() -> None:
    assert resolve_test_path(ALL_TESTS) == "suites"
    assert resolve_test_path("Nope") is None
    assert all(path.startswith("suites") for path in TEST_CONFIGURATIONS.values())


def test_version() -> None:
    result = runner.invoke(commands.app, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.stdout


def test_list_prints_suites() -> None:
    result = runner.invoke(commands.app, ["list"])
    assert result.exit_code == 0
    assert "AccountBalanceQuery" in result.stdout
    assert "TokenPause" in result.stdout


def test_run_unknown_test_exits_non_zero(launched) -> None:
    result = runner.invoke(commands.app, ["run", "--test", "Nope"])
    assert result.exit_code == 1
    assert "Unknown test: Nope" in result.stdout
    assert "Available tests" in result.stdout
    assert launched == []


def test_run_launches_pytest_on_the_suite(launched, monkeypatch, tmp_path) -> None:
    monkeypatch.setenv("MIRROR_NODE_REST_URL", "http://mirror:5551")

    result = runner.invoke(commands.app, ["run", "--test", "TokenPause", "--network", "local", "--", "-x"])

    assert result.exit_code == 0, result.stdout
    command = launched[0]
    assert command[1:4] == ["-m", "pytest", TEST_CONFIGURATIONS["TokenPause"]]
    assert command[-1] == "-x"
    assert os.environ["NODE_TYPE"] == "local"
    assert os.environ[logging_utils.LOG_FILE_ENV] == str(tmp_path / "local-tokenpause.log")


def test_run_propagates_pytest_failure(launched, monkeypatch) -> None:
    monkeypatch.setattr(commands.subprocess, "run", lambda command, env=None, check=False: SimpleNamespace(returncode=3))

    result = runner.invoke(commands.app, ["run", "--test", "ALL"])

    assert result.exit_code == 3


def test_run_rejects_placeholder_testnet_operator(launched, monkeypatch) -> None:
    monkeypatch.setenv("OPERATOR_ACCOUNT_ID", "***")
    monkeypatch.setenv("OPERATOR_ACCOUNT_PRIVATE_KEY", "***")

    result = runner.invoke(commands.app, ["run", "--network", "testnet"])

    assert result.exit_code == 1
    assert "OPERATOR_ACCOUNT_ID" in result.stdout
    assert launched == []


def test_run_rejects_unknown_network(launched) -> None:
    result = runner.invoke(commands.app, ["run", "--network", "mainnet"])
    assert result.exit_code == 1
    assert launched == []


def test_run_log_path_is_per_network_and_suite(monkeypatch, tmp_path) -> None:
    monkeypatch.setattr(logging_utils, "get_log_dir", lambda: tmp_path / "logs")

    assert logging_utils.run_log_path("TokenPause", "testnet") == tmp_path / "logs" / "testnet-tokenpause.log"
    assert logging_utils.run_log_path("ALL", "local") == tmp_path / "logs" / "local-all.log"


def test_ensure_rotating_log_file_adds_one_sink_per_path(monkeypatch, tmp_path) -> None:
    monkeypatch.setattr(logging_utils, "_SINK_IDS", {})
    log_path = tmp_path / "logs" / "local-all.log"

    first = logging_utils.ensure_rotating_log_file(log_path)
    second = logging_utils.ensure_rotating_log_file(log_path)
    try:
        assert first == second == log_path
        assert log_path.parent.is_dir()
        assert list(logging_utils._SINK_IDS) == [str(log_path)]
    finally:
        logger.remove(logging_utils._SINK_IDS[str(log_path)])


def test_attach_run_log_follows_the_exported_file(monkeypatch, tmp_path) -> None:
    monkeypatch.setattr(logging_utils, "_SINK_IDS", {})
    assert logging_utils.attach_run_log() is None

    log_path = tmp_path / "testnet-tokenpause.log"
    monkeypatch.setenv(logging_utils.LOG_FILE_ENV, str(log_path))
    try:
        assert logging_utils.attach_run_log() == log_path
        logger.debug("child line")
        logger.complete()
    finally:
        logger.remove(logging_utils._SINK_IDS[str(log_path)])

    assert "child line" in log_path.read_text(encoding="utf-8")
