from __future__ import annotations

import json
import logging
import re
from typing import Annotated, List

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

ANCHOR_TIME_PATTERN = re.compile(r"^([01]\d|2[0-3]):([0-5]\d):([0-5]\d)$")


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="NIHONIFY_",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    app_title: str = Field(default="Nihonify API", description="FastAPI application title")
    app_description: str = Field(
        default="西暦と元号（年号）を相互に変換するためのAPI",
        description="OpenAPI 用の説明文",
    )
    allowed_origins: Annotated[List[str], NoDecode] = Field(
        default_factory=lambda: ["*"],
        description="CORS で許可するオリジンの一覧",
    )
    log_level: str = Field(
        default="INFO",
        description="アプリケーションログのレベル (DEBUG/INFO/WARNING/ERROR/CRITICAL)",
    )
    enable_request_logging: bool = Field(
        default=True,
        description="各リクエストのログ出力を有効化",
    )
    date_anchor_time: str = Field(
        default="00:00:00",
        description="YYYY-MM-DD 形式の日付を UTC の時刻に固定する際の時刻 (HH:MM:SS)",
    )

    @field_validator("allowed_origins", mode="before")
    @classmethod
    def _split_origins(cls, value):
        if isinstance(value, str):
            raw = value.strip()
            if raw.startswith("["):
                return json.loads(raw)
            return [origin.strip() for origin in raw.split(",") if origin.strip()]
        return value

    @field_validator("log_level")
    @classmethod
    def _normalise_log_level(cls, value: str) -> str:
        candidate = value.upper()
        if candidate not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            logging.getLogger("nihonify.settings").warning(
                "Unknown log level '%s', falling back to INFO.", value
            )
            return "INFO"
        return candidate

    @field_validator("date_anchor_time")
    @classmethod
    def _validate_anchor_time(cls, value: str) -> str:
        cleaned = value.strip()
        if not ANCHOR_TIME_PATTERN.match(cleaned):
            raise ValueError("date_anchor_time must be formatted as HH:MM:SS")
        return cleaned


settings = Settings()
