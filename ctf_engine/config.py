"""Application configuration with validation."""
from typing import Literal
from functools import lru_cache
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings, read from the environment and `.env`."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    APP_NAME: str = "CTF Event Engine"
    APP_VERSION: str = "1.0.0"
    APP_ENV: Literal["development", "staging", "production"] = "development"
    LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    LOG_FORMAT: Literal["json", "console"] = "console"

    # Event definition
    EVENT_CONFIGURATION: str = Field(
        default="event.yml",
        description="Path to the two-document YAML event definition"
    )

    # Dynamic scoring
    SCORING_MODEL: Literal["linear", "fast_logistic", "slow_logistic"] = Field(
        default="slow_logistic",
        description="Decay curve applied to challenge scores"
    )

    @field_validator("EVENT_CONFIGURATION")
    @classmethod
    def validate_event_configuration(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("EVENT_CONFIGURATION must be a non-empty path")
        return v

    @field_validator("LOG_LEVEL", mode="before")
    @classmethod
    def uppercase_log_level(cls, v):
        return v.upper() if isinstance(v, str) else v

    @field_validator("SCORING_MODEL", mode="before")
    @classmethod
    def lowercase_scoring_model(cls, v):
        return v.strip().lower() if isinstance(v, str) else v


@lru_cache
def get_settings() -> Settings:
    return Settings()
