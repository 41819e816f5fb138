"""Live conformance suites: every test runs with the configured operator set up."""

import pytest


@pytest.fixture(autouse=True)
def _operator_session(operator):
    return operator
