"""
Pytest configuration and shared fixtures for chainutil tests.

This conftest.py:
1. Adds project root to sys.path for imports
2. Provides commonly-used fixtures via pytest's autodiscovery
3. Configures pytest markers and settings
"""

import sys
from pathlib import Path

import pytest

# =============================================================================
# Path Setup - Must happen before any local imports
# =============================================================================

_PROJECT_ROOT = Path(__file__).resolve().parent.parent
_TESTS_ROOT = Path(__file__).resolve().parent

for _path in [str(_PROJECT_ROOT), str(_TESTS_ROOT)]:
    if _path not in sys.path:
        sys.path.insert(0, _path)

import importlib

_common = importlib.import_module("fixtures.common")

make_block = _common.make_block
make_ledger_entry = _common.make_ledger_entry


# =============================================================================
# Pytest Fixtures (autodiscovered by pytest)
# =============================================================================

@pytest.fixture
def block():
    """Provide a default Block for tests."""
    return make_block()


@pytest.fixture
def ledger_entry():
    """Provide a default LedgerEntry for tests."""
    return make_ledger_entry()


@pytest.fixture(autouse=True)
def clean_chainutil_env(monkeypatch):
    """Keep CHAINUTIL_* variables from the developer's shell out of tests."""
    import os

    for key in list(os.environ):
        if key.startswith("CHAINUTIL_"):
            monkeypatch.delenv(key, raising=False)

    from chainutil.config import set_default_config

    set_default_config(None)
    yield
    set_default_config(None)


# =============================================================================
# Pytest Configuration
# =============================================================================

def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )
    config.addinivalue_line(
        "markers", "unit: marks tests as unit tests"
    )
