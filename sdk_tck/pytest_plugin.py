"""Pytest plugin: fixtures shared by the conformance suites.

Registered through the ``pytest11`` entry point, so installing the package
makes the fixtures available to any suite directory.
"""

from __future__ import annotations

from collections.abc import AsyncIterator

import pytest
import pytest_asyncio

from sdk_tck.cli.shared.logging_utils import attach_run_log
from sdk_tck.config.access import get_settings
from sdk_tck.config.schema import TckSettings
from sdk_tck.helpers.setup import reset, set_operator
from sdk_tck.rpc.request import PytestScope
from sdk_tck.services.consensus import ConsensusInfoClient
from sdk_tck.services.mirror import MirrorNodeClient
from sdk_tck.verify.dual_source import DualSource, get_default_sources


def pytest_configure(config):
    """Register custom markers and join the log file of the calling ``sdk-tck run``."""
    config.addinivalue_line(
        "markers",
        "tck: live conformance test that needs a JSON-RPC server and a network",
    )
    attach_run_log()


@pytest.fixture
def tck_scope(request) -> PytestScope:
    """Scope handed to ``json_rpc_request``; its session is shared per test file."""
    return PytestScope(request)


@pytest.fixture
def settings() -> TckSettings:
    return get_settings()


@pytest.fixture
def sources() -> DualSource:
    return get_default_sources()


@pytest.fixture
def mirror_client(sources: DualSource) -> MirrorNodeClient:
    return sources.mirror


@pytest.fixture
def consensus_client(sources: DualSource) -> ConsensusInfoClient:
    return sources.consensus


@pytest_asyncio.fixture
async def operator(tck_scope: PytestScope, settings: TckSettings) -> AsyncIterator[TckSettings]:
    """Run ``setup`` with the configured operator before the test and ``reset`` after."""
    await set_operator(tck_scope, settings.operator_account_id, settings.operator_account_private_key)
    yield settings
    await reset(tck_scope)
