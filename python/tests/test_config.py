"""Search settings read from the environment."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from blockslide.config import SearchConfig


def test_defaults() -> None:
    config = SearchConfig.from_env()
    assert config.max_states is None
    assert config.progress_every == 10_000
    assert config.log_level == "WARNING"


def test_reads_variables(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("BLOCKSLIDE_MAX_STATES", "500")
    monkeypatch.setenv("BLOCKSLIDE_PROGRESS_EVERY", "0")
    monkeypatch.setenv("BLOCKSLIDE_LOG_LEVEL", "debug")
    config = SearchConfig.from_env()
    assert (config.max_states, config.progress_every, config.log_level) == (500, 0, "DEBUG")


def test_keyword_arguments_override_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("BLOCKSLIDE_MAX_STATES", "500")
    assert SearchConfig(max_states=7).max_states == 7


def test_empty_value_falls_back_to_default(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("BLOCKSLIDE_MAX_STATES", "")
    assert SearchConfig.from_env().max_states is None


def test_is_frozen() -> None:
    config = SearchConfig()
    with pytest.raises(ValidationError):
        config.max_states = 3


@pytest.mark.parametrize("value", ["lots", "1.5", "-3", "0"])
def test_rejects_bad_max_states(monkeypatch: pytest.MonkeyPatch, value: str) -> None:
    monkeypatch.setenv("BLOCKSLIDE_MAX_STATES", value)
    with pytest.raises(ValidationError) as excinfo:
        SearchConfig.from_env()
    assert excinfo.value.errors()[0]["loc"][0] == "max_states"


def test_rejects_negative_progress_interval(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("BLOCKSLIDE_PROGRESS_EVERY", "-1")
    with pytest.raises(ValidationError):
        SearchConfig.from_env()


@pytest.mark.parametrize("value", ["loud", "verbose", "5"])
def test_rejects_unknown_log_level(monkeypatch: pytest.MonkeyPatch, value: str) -> None:
    monkeypatch.setenv("BLOCKSLIDE_LOG_LEVEL", value)
    with pytest.raises(ValidationError) as excinfo:
        SearchConfig.from_env()
    assert excinfo.value.errors()[0]["loc"] == ("log_level",)
