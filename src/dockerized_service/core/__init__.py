# Core modules shared by the app, the CLI and the tests
from .config import Settings, setup_logging, parse_port, parse_log_level, DEFAULT_PORT
from .auth import (
    check_basic_auth,
    extract_basic_credentials,
    AUTH_REQUIRED,
    INVALID_CREDENTIALS,
    WWW_AUTHENTICATE,
)

__all__ = [
    # Config
    "Settings",
    "setup_logging",
    "parse_port",
    "parse_log_level",
    "DEFAULT_PORT",
    # Auth
    "check_basic_auth",
    "extract_basic_credentials",
    "AUTH_REQUIRED",
    "INVALID_CREDENTIALS",
    "WWW_AUTHENTICATE",
]
