"""Search settings, with ``BLOCKSLIDE_*`` environment overrides."""

from __future__ import annotations

from typing import Literal

from pydantic import NonNegativeInt, PositiveInt, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

ENV_PREFIX = "BLOCKSLIDE_"
ENV_MAX_STATES = f"{ENV_PREFIX}MAX_STATES"
ENV_PROGRESS_EVERY = f"{ENV_PREFIX}PROGRESS_EVERY"
ENV_LOG_LEVEL = f"{ENV_PREFIX}LOG_LEVEL"

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class SearchConfig(BaseSettings):
    """Knobs for a single search run.

    ``max_states`` caps the number of distinct configurations recorded
    (``None`` means unlimited); ``progress_every`` sets how many expansions
    pass between progress log lines (0 disables them).
    """

    max_states: PositiveInt | None = None
    progress_every: NonNegativeInt = 10_000
    log_level: LogLevel = "WARNING"

    model_config = SettingsConfigDict(
        env_prefix=ENV_PREFIX,
        case_sensitive=False,
        env_ignore_empty=True,
        frozen=True,
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_level(cls, value: object) -> object:
        return value.strip().upper() if isinstance(value, str) else value

    @classmethod
    def from_env(cls) -> SearchConfig:
        """Load from the process environment; raises ``ValidationError``."""
        return cls()
