"""
Tests for environment configuration parsing.
"""

import pytest

from flakeid import env
from flakeid.errors import ConfigurationError


def test_int_env_uses_default_when_unset(monkeypatch):
    monkeypatch.delenv("FLAKEID_TEST_VALUE", raising=False)

    assert env._int_env("FLAKEID_TEST_VALUE", 17) == 17


def test_int_env_reads_value(monkeypatch):
    monkeypatch.setenv("FLAKEID_TEST_VALUE", "512")

    assert env._int_env("FLAKEID_TEST_VALUE", 0) == 512


def test_int_env_rejects_non_integer(monkeypatch):
    monkeypatch.setenv("FLAKEID_TEST_VALUE", "twelve")

    with pytest.raises(ConfigurationError, match="FLAKEID_TEST_VALUE must be an integer"):
        env._int_env("FLAKEID_TEST_VALUE", 0)


def test_defaults_are_sane():
    assert isinstance(env.FLAKEID_MACHINE_ID, int)
    assert isinstance(env.FLAKEID_EPOCH, int)
    assert env.FLAKEID_LOG_LEVEL == env.FLAKEID_LOG_LEVEL.upper()
