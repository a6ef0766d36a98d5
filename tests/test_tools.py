"""Tests for the profiling decorator."""

from __future__ import annotations

import logging

import pytest

from tools import PROFILE_ENV_VAR, profile


@profile()
def add(a: int, b: int) -> int:
    return a + b


@profile(limit=5)
def explode() -> None:
    raise RuntimeError("boom")


def test_profile_disabled_just_calls(monkeypatch, caplog) -> None:
    monkeypatch.delenv(PROFILE_ENV_VAR, raising=False)
    with caplog.at_level(logging.DEBUG, logger="tools"):
        assert add(2, 3) == 5
    assert "Profile of" not in caplog.text


def test_profile_enabled_logs_stats(monkeypatch, caplog) -> None:
    monkeypatch.setenv(PROFILE_ENV_VAR, "1")
    with caplog.at_level(logging.DEBUG, logger="tools"):
        assert add(2, 3) == 5
    assert "Profile of add" in caplog.text


def test_profile_passes_exceptions_through(monkeypatch, caplog) -> None:
    monkeypatch.setenv(PROFILE_ENV_VAR, "1")
    with caplog.at_level(logging.DEBUG, logger="tools"):
        with pytest.raises(RuntimeError, match="boom"):
            explode()
    assert "Profile of explode" in caplog.text


def test_profile_keeps_function_name() -> None:
    assert add.__name__ == "add"
    assert explode.__name__ == "explode"
