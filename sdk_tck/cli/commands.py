"""CLI commands for sdk_tck.

``run`` resolves a suite by name, normalizes the network environment and
hands the suite to pytest in a child process; ``list`` prints the table.
"""

import os
import subprocess
import sys
from pathlib import Path

import typer
from loguru import logger
from rich.console import Console
from rich.table import Table

from sdk_tck import __logo__, __version__
from sdk_tck.cli.shared.logging_utils import LOG_FILE_ENV, ensure_rotating_log_file, run_log_path
from sdk_tck.cli.test_paths import ALL_TESTS, TEST_CONFIGURATIONS, resolve_test_path
from sdk_tck.config.loader import set_network_environment
from sdk_tck.utils.exceptions import ConfigError

app = typer.Typer(
    name="sdk-tck",
    help=f"{__logo__} sdk-tck - SDK conformance test kit",
    no_args_is_help=True,
)

console = Console()


def version_callback(value: bool):
    if value:
        console.print(f"{__logo__} sdk-tck v{__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        None, "--version", "-v", callback=version_callback, is_eager=True
    ),
):
    """sdk-tck - SDK conformance test kit."""
    pass


def _print_available_tests() -> None:
    console.print("\nAvailable tests:")
    for name in TEST_CONFIGURATIONS:
        console.print(f" - {name}")


def build_pytest_command(test_path: str, extra_args: list[str] | None = None) -> list[str]:
    return [sys.executable, "-m", "pytest", test_path, *(extra_args or [])]


@app.command()
def run(
    test: str = typer.Option(
        os.environ.get("TEST", ALL_TESTS), "--test", "-t", help="Suite name (see `sdk-tck list`)"
    ),
    network: str = typer.Option(
        os.environ.get("NETWORK", "local"), "--network", "-n", help="local or testnet"
    ),
    env_file: Path | None = typer.Option(None, "--env-file", help="Env file (default: ./.env)"),
    pytest_args: list[str] | None = typer.Argument(None, help="Extra arguments passed to pytest"),
):
    """Run a conformance suite against the server at JSON_RPC_SERVER_URL."""
    test_path = resolve_test_path(test)
    if test_path is None:
        console.print(f"[red]Unknown test: {test}[/red]")
        _print_available_tests()
        raise typer.Exit(1)
    log_path = ensure_rotating_log_file(run_log_path(test, network))

    try:
        applied = set_network_environment(network, env_file)
    except ConfigError as exc:
        console.print(f"[red]{exc.message}[/red]")
        raise typer.Exit(1) from exc

    logger.info("Running {} ({}) on {} with {}", test, test_path, network, sorted(applied))
    console.print(f"{__logo__} Running [cyan]{test}[/cyan] on [cyan]{network}[/cyan]")
    console.print(f"[dim]Logs: {log_path}[/dim]")

    os.environ[LOG_FILE_ENV] = str(log_path)
    command = build_pytest_command(test_path, pytest_args)
    try:
        completed = subprocess.run(command, env=os.environ.copy(), check=False)
    except OSError as exc:
        logger.exception("Failed to start pytest")
        console.print(f"[red]Unhandled error: {exc}[/red]")
        raise typer.Exit(1) from exc
    if completed.returncode != 0:
        raise typer.Exit(completed.returncode)


@app.command("list")
def list_tests():
    """List the suites ``run --test`` accepts."""
    table = Table(title="Conformance Suites")
    table.add_column("Name", style="cyan")
    table.add_column("Path")
    for name, path in TEST_CONFIGURATIONS.items():
        table.add_row(name, path)
    console.print(table)


if __name__ == "__main__":
    app()
