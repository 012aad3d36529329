"""Configuration utilities for infrastructure layer."""

import os

from dotenv import load_dotenv

load_dotenv()

LOG_FORMATS = ("console", "json")


def get_log_level() -> str:
    """
    Get the log level name.

    Returns:
        Upper-cased LOG_LEVEL env var, defaults to "INFO"
    """
    return os.getenv("LOG_LEVEL", "INFO").upper()


def get_log_format() -> str:
    """
    Get the log renderer.

    Returns:
        "console" or "json" from LOG_FORMAT; unknown values fall back
        to "console"
    """
    value = os.getenv("LOG_FORMAT", "console").lower()
    return value if value in LOG_FORMATS else "console"


def get_app_version() -> str:
    # Docker build ARG -> ENV APP_VERSION
    return os.getenv("APP_VERSION", "0.0.0-dev")
