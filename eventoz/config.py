"""
Process-wide configuration.

Values come from the environment (optionally seeded from a .env file) and
are read once at startup into an immutable Settings object.
"""

import logging
import os
from dataclasses import dataclass, field
from typing import List, Optional

from dotenv import load_dotenv

DEFAULT_PORT = 3000
DEFAULT_TOKEN_EXPIRATION_MINUTES = 1440  # 24 hours
DEFAULT_CORS_ORIGINS = "https://eventoz.netlify.app"


@dataclass(frozen=True)
class Settings:
    jwt_secret: str
    database_url: Optional[str] = None
    port: int = DEFAULT_PORT
    token_expiration_minutes: int = DEFAULT_TOKEN_EXPIRATION_MINUTES
    cors_origins: List[str] = field(default_factory=lambda: [DEFAULT_CORS_ORIGINS])
    log_level: str = "INFO"


def load_settings() -> Settings:
    """
    Build Settings from environment variables.

    Returns:
        Settings: The loaded configuration.

    Raises:
        RuntimeError: If JWT_SECRET is missing, a numeric value is malformed,
            or LOG_LEVEL is not a known logging level.
    """
    load_dotenv()

    jwt_secret = os.getenv("JWT_SECRET")
    if not jwt_secret:
        raise RuntimeError("JWT_SECRET is missing. Set it in .env")

    try:
        port = int(os.getenv("PORT", DEFAULT_PORT))
        expiration = int(os.getenv("TOKEN_EXPIRATION_MINUTES", DEFAULT_TOKEN_EXPIRATION_MINUTES))
    except ValueError as e:
        raise RuntimeError(f"Invalid numeric setting: {e}") from e

    log_level = os.getenv("LOG_LEVEL", "INFO").upper()
    if not isinstance(logging.getLevelName(log_level), int):
        raise RuntimeError(f"Invalid LOG_LEVEL: {log_level}")

    origins = os.getenv("CORS_ORIGINS", DEFAULT_CORS_ORIGINS)

    return Settings(
        jwt_secret=jwt_secret,
        database_url=os.getenv("DATABASE_URL"),
        port=port,
        token_expiration_minutes=expiration,
        cors_origins=[o.strip() for o in origins.split(",") if o.strip()],
        log_level=log_level,
    )
