from __future__ import annotations

import re
from pathlib import Path

from pydantic import AnyUrl, Field
from pydantic import model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

ENV_FILE = Path(__file__).resolve().parents[2] / ".env"

TRACKING_ID_RE = re.compile(r"^UA-\d+-\d+$")


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=(str(ENV_FILE), ".env"),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # App
    app_env: str = Field(default="development", alias="HIT_APP_ENV")

    # Collection endpoints
    collect_url: AnyUrl = Field(
        default="https://www.google-analytics.com/collect", alias="HIT_COLLECT_URL"
    )
    debug_collect_url: AnyUrl = Field(
        default="https://www.google-analytics.com/debug/collect",
        alias="HIT_DEBUG_COLLECT_URL",
    )
    # Debug hits go to the validation endpoint and are never recorded.
    debug: bool = Field(default=False, alias="HIT_DEBUG")

    # Protocol limits
    max_get_length: int = Field(default=2000, alias="HIT_MAX_GET_LENGTH")
    max_post_bytes: int = Field(default=8192, alias="HIT_MAX_POST_BYTES")
    queue_time_soft_limit_ms: int = Field(
        default=4 * 60 * 60 * 1000, alias="HIT_QUEUE_TIME_SOFT_LIMIT_MS"
    )

    # Defaults applied to new parameter sets
    default_tracking_id: str | None = Field(
        default=None, alias="HIT_DEFAULT_TRACKING_ID"
    )
    user_agent: str = Field(default="hitkit/0.1.0", alias="HIT_USER_AGENT")

    @model_validator(mode="after")
    def validate_runtime_constraints(self) -> "Settings":
        if self.max_get_length <= 0:
            raise ValueError("HIT_MAX_GET_LENGTH must be positive")
        if self.max_post_bytes <= 0:
            raise ValueError("HIT_MAX_POST_BYTES must be positive")
        if self.max_get_length > self.max_post_bytes:
            raise ValueError("HIT_MAX_GET_LENGTH must be <= HIT_MAX_POST_BYTES")
        if self.queue_time_soft_limit_ms <= 0:
            raise ValueError("HIT_QUEUE_TIME_SOFT_LIMIT_MS must be positive")
        if self.default_tracking_id is not None and not TRACKING_ID_RE.match(
            self.default_tracking_id
        ):
            raise ValueError("HIT_DEFAULT_TRACKING_ID must look like UA-XXXX-Y")
        return self

    def endpoint(self) -> str:
        return str(self.debug_collect_url if self.debug else self.collect_url)


settings = Settings()
