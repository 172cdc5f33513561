"""
Configuration snapshot loaded once from environment variables.
"""
import os
import logging
from dataclasses import dataclass
from typing import Optional

from dotenv import find_dotenv, load_dotenv

DEFAULT_PORT = 3000
DEFAULT_HOST = "0.0.0.0"
DEFAULT_LOG_LEVEL = "INFO"

logger = logging.getLogger(__name__)


def _optional(value: Optional[str]) -> Optional[str]:
    # Empty strings count as unset
    return value if value else None


def parse_port(raw: Optional[str]) -> int:
    """Parse PORT, falling back to DEFAULT_PORT when unset or invalid."""
    if raw is None or not raw.strip():
        return DEFAULT_PORT
    try:
        port = int(raw)
    except ValueError:
        logger.warning(f"Invalid PORT value {raw!r}, using {DEFAULT_PORT}")
        return DEFAULT_PORT
    if not 0 <= port <= 65535:
        logger.warning(f"PORT {port} out of range, using {DEFAULT_PORT}")
        return DEFAULT_PORT
    return port


def parse_log_level(raw: Optional[str]) -> str:
    """
    Normalise LOG_LEVEL to a standard level name.

    Aliases such as WARN resolve to their canonical name (WARNING); unknown
    names fall back to INFO. The lowercased result is accepted by uvicorn.
    """
    name = (raw or DEFAULT_LOG_LEVEL).strip().upper()
    level = getattr(logging, name, None)
    if not isinstance(level, int) or level <= logging.NOTSET:
        logger.warning(f"Unknown LOG_LEVEL {raw!r}, using {DEFAULT_LOG_LEVEL}")
        return DEFAULT_LOG_LEVEL
    return logging.getLevelName(level)


@dataclass(frozen=True)
class Settings:
    """Immutable settings held for the lifetime of the process."""

    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    username: Optional[str] = None
    password: Optional[str] = None
    secret_message: Optional[str] = None
    log_level: str = DEFAULT_LOG_LEVEL

    @property
    def credentials_configured(self) -> bool:
        return self.username is not None and self.password is not None

    @classmethod
    def from_env(cls, load_env_file: bool = True) -> "Settings":
        """
        Build settings from the environment.

        Args:
            load_env_file: merge a .env file into the environment first

        Returns:
            A frozen Settings instance
        """
        if load_env_file:
            load_dotenv(find_dotenv(usecwd=True))

        return cls(
            host=os.getenv("HOST") or DEFAULT_HOST,
            port=parse_port(os.getenv("PORT")),
            username=_optional(os.getenv("USERNAME")),
            password=_optional(os.getenv("PASSWORD")),
            secret_message=_optional(os.getenv("SECRET_MESSAGE")),
            log_level=parse_log_level(os.getenv("LOG_LEVEL")),
        )


def setup_logging(level: str = DEFAULT_LOG_LEVEL):
    """Configure logging based on LOG_LEVEL."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format='%(asctime)s - %(levelname)s - %(name)s - %(message)s'
    )
    return logging.getLogger("dockerized_service")
