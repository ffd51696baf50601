"""Pytest configuration applied to the entire test suite."""

import pytest

from rgba_blend.utils.debug import DEBUG_ENV_VAR


@pytest.fixture(autouse=True)
def _quiet_debug(monkeypatch):
    """Keep debug output off unless a test turns it on."""
    monkeypatch.delenv(DEBUG_ENV_VAR, raising=False)


def pytest_make_parametrize_id(config, val, argname):
    """Give huge ints a short test id; str() on them exceeds Python's digit limit."""
    if isinstance(val, int) and not isinstance(val, bool) and val.bit_length() > 1000:
        return f"{argname}-bigint{val.bit_length()}bits"
    return None
