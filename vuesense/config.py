"""Runtime configuration loaded from environment variables.

Values come from the process environment, with a local ``.env`` file loaded
first via python-dotenv. Only the OpenAI API key is required.
"""

from __future__ import annotations

import logging
import os
from typing import Optional

from dotenv import find_dotenv, load_dotenv
from pydantic import BaseModel, ConfigDict

logger = logging.getLogger("vuesense.config")

DEFAULT_MODEL = "gpt-4o-mini"
DEFAULT_TEMPERATURE = 0.3
DEFAULT_MAX_TOKENS = 2000
DEFAULT_PORT = 3000

ALLOWED_ORIGINS = (
    "http://localhost:3000",
    "https://www.alignvue.com",
    "https://alignvue.com",
)


class ConfigError(Exception):
    """Raised when required configuration is missing."""


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return float(raw)
    except ValueError:
        logger.warning("Invalid %s=%r, using default %s", name, raw, default)
        return default


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        logger.warning("Invalid %s=%r, using default %s", name, raw, default)
        return default


def cors_origins_from_env() -> tuple[str, ...]:
    """Origins from CORS_ORIGINS (comma separated), else the built-in allow-list."""
    load_dotenv(find_dotenv(usecwd=True))
    raw = os.getenv("CORS_ORIGINS", "")
    origins = tuple(o.strip() for o in raw.split(",") if o.strip())
    return origins or ALLOWED_ORIGINS


class Settings(BaseModel):
    model_config = ConfigDict(frozen=True)

    openai_api_key: str
    openai_base_url: Optional[str] = None
    model: str = DEFAULT_MODEL
    temperature: float = DEFAULT_TEMPERATURE
    max_tokens: int = DEFAULT_MAX_TOKENS
    request_timeout: float = 60
    port: int = DEFAULT_PORT
    environment: str = "production"
    knowledge_base_dir: str = "knowledge_base"
    cors_origins: tuple[str, ...] = ALLOWED_ORIGINS

    @property
    def expose_error_details(self) -> bool:
        return self.environment.lower() == "development"

    @classmethod
    def from_env(cls) -> "Settings":
        """Build settings from the environment (and ``.env``, if present).

        Raises:
            ConfigError: if OPENAI_API_KEY is not set.
        """
        load_dotenv(find_dotenv(usecwd=True))

        api_key = os.getenv("OPENAI_API_KEY", "").strip()
        if not api_key:
            raise ConfigError("OPENAI_API_KEY not set in environment variables")

        return cls(
            openai_api_key=api_key,
            openai_base_url=os.getenv("OPENAI_BASE_URL") or None,
            model=os.getenv("OPENAI_MODEL") or DEFAULT_MODEL,
            temperature=_env_float("TEMPERATURE", DEFAULT_TEMPERATURE),
            max_tokens=_env_int("MAX_TOKENS", DEFAULT_MAX_TOKENS),
            request_timeout=_env_float("REQUEST_TIMEOUT", 60),
            port=_env_int("PORT", DEFAULT_PORT),
            environment=os.getenv("APP_ENV") or os.getenv("NODE_ENV") or "production",
            knowledge_base_dir=os.getenv("KNOWLEDGE_BASE_DIR") or "knowledge_base",
            cors_origins=cors_origins_from_env(),
        )
