"""
Configuration Module
Environment-driven settings for the endpoint wrappers.
Fail-fast validation so a broken environment stops the test run early.
"""
import os
import logging
from typing import Mapping, Optional

from pydantic import BaseModel, Field, ValidationError, field_validator

logger = logging.getLogger("placeholder-taf.config")

DEFAULT_BASE_URL = "https://jsonplaceholder.typicode.com"


class ApiSettings(BaseModel):
    base_url: str = Field(DEFAULT_BASE_URL, min_length=1, description="Root URL of the backend under test")
    timeout_seconds: float = Field(10.0, gt=0, description="Per-request timeout in seconds")
    user_agent: str = Field("placeholder-taf/0.1", min_length=1)
    env: str = Field("dev", description="dev or prod, selects the log format")
    log_level: str = "INFO"

    @field_validator('base_url')
    def strip_trailing_slash(cls, v):
        if not v.startswith(("http://", "https://")):
            raise ValueError('base_url must start with http:// or https://')
        return v.rstrip("/")

    @field_validator('log_level')
    def validate_level(cls, v):
        level = v.upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f'unknown log level {v}')
        return level


def load_settings(environ: Optional[Mapping[str, str]] = None) -> ApiSettings:
    """
    Build ApiSettings from environment variables.
    Unset variables fall back to the model defaults.
    """
    env = os.environ if environ is None else environ

    raw = {
        "base_url": env.get("PLACEHOLDER_BASE_URL"),
        "timeout_seconds": env.get("PLACEHOLDER_TIMEOUT"),
        "user_agent": env.get("PLACEHOLDER_USER_AGENT"),
        "env": env.get("ENV"),
        "log_level": env.get("LOG_LEVEL"),
    }

    try:
        return ApiSettings(**{k: v for k, v in raw.items() if v is not None})
    except ValidationError as e:
        logger.critical(f"Invalid configuration: {e}")
        raise ValueError(f"CRITICAL: Invalid configuration: {e}") from e
