"""Unit test environment helpers."""

import pytest

DDL_ENV_VARS = ("DDL_DEFAULT_DIALECT", "DDL_IDENTIFIER_MAX_LENGTH", "DDL_LOG_STATEMENTS")


@pytest.fixture(autouse=True)
def _clean_ddl_env(monkeypatch):
    """Run every unit test against default DDL settings."""
    for name in DDL_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    yield
