"""
Runtime settings for the electrics package.

Values come from the environment (or a local .env file):

    ELECTRICS_INPUT_POLICY   strict | permissive   (default: strict)
    ELECTRICS_LOG_LEVEL      logging level name    (default: WARNING)
"""

import os
from enum import Enum
from functools import lru_cache

from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator


class Policy(str, Enum):
    """How the resistance calculator treats non-physical input."""
    STRICT = "strict"
    PERMISSIVE = "permissive"


class Settings(BaseModel):
    input_policy: Policy = Field(Policy.STRICT, description="Default input policy for calculations")
    log_level: str = Field("WARNING", description="Log level for the electrics logger")

    @field_validator("input_policy", mode="before")
    @classmethod
    def _normalize_policy(cls, value):
        if isinstance(value, str):
            return value.strip().lower()
        return value

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG", "NOTSET"):
            raise ValueError(f"Unknown log level '{value}'")
        return level


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Load settings once; call get_settings.cache_clear() to reload."""
    load_dotenv()
    return Settings(
        input_policy=os.getenv("ELECTRICS_INPUT_POLICY", Policy.STRICT.value),
        log_level=os.getenv("ELECTRICS_LOG_LEVEL", "WARNING"),
    )
