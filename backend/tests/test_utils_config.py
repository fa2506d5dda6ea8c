# backend/tests/test_utils_config.py

import pytest

from spark_joy.utils.config import EnvVarMissingError, get_env, get_env_bool, get_env_int


def test_get_env_required_missing(monkeypatch):
    monkeypatch.delenv("SPARK_JOY_TEST_VALUE", raising=False)

    with pytest.raises(EnvVarMissingError) as exc_info:
        get_env("SPARK_JOY_TEST_VALUE")

    assert exc_info.value.name == "SPARK_JOY_TEST_VALUE"


def test_get_env_empty_string_uses_default(monkeypatch):
    monkeypatch.setenv("SPARK_JOY_TEST_VALUE", "")

    assert get_env("SPARK_JOY_TEST_VALUE", default="fallback", required=False) == "fallback"


def test_get_env_int(monkeypatch):
    monkeypatch.setenv("SPARK_JOY_TEST_INT", "7")
    assert get_env_int("SPARK_JOY_TEST_INT", default=1) == 7

    monkeypatch.setenv("SPARK_JOY_TEST_INT", "seven")
    with pytest.raises(RuntimeError):
        get_env_int("SPARK_JOY_TEST_INT", default=1)


@pytest.mark.parametrize("raw, expected", [("1", True), ("TRUE", True), ("off", False), ("no", False)])
def test_get_env_bool(monkeypatch, raw, expected):
    monkeypatch.setenv("SPARK_JOY_TEST_BOOL", raw)

    assert get_env_bool("SPARK_JOY_TEST_BOOL", default=not expected) is expected


def test_get_env_bool_invalid(monkeypatch):
    monkeypatch.setenv("SPARK_JOY_TEST_BOOL", "maybe")

    with pytest.raises(RuntimeError):
        get_env_bool("SPARK_JOY_TEST_BOOL", default=True)


def test_get_env_allow_empty_keeps_empty_string(monkeypatch):
    monkeypatch.setenv("SPARK_JOY_TEST_VALUE", "")
    assert get_env("SPARK_JOY_TEST_VALUE", default="fallback", required=False, allow_empty=True) == ""

    monkeypatch.delenv("SPARK_JOY_TEST_VALUE")
    assert get_env("SPARK_JOY_TEST_VALUE", default="fallback", required=False, allow_empty=True) == "fallback"
