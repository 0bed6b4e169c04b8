"""
Runtime settings and logging setup.

Values come from the environment (a .env file is honoured):
    - SENSORCFG_JSON_INDENT: indentation of written configs (default 2)
    - SENSORCFG_LOG_LEVEL: level used by setup_logging (default WARNING)
"""

import logging
import os
from dataclasses import dataclass, field

from dotenv import load_dotenv

load_dotenv()  # take environment variables from .env


DEFAULT_JSON_INDENT = 2
DEFAULT_LOG_LEVEL = "WARNING"


def _env_int(key: str, default: int) -> int:
    raw = os.getenv(key)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = int(raw)
    except ValueError:
        return default
    return value if value >= 0 else default


@dataclass(frozen=True)
class EditorSettings:
    """Editor configuration.

    Values can be overridden via environment variables:
    - SENSORCFG_JSON_INDENT
    - SENSORCFG_LOG_LEVEL
    """

    json_indent: int = field(
        default_factory=lambda: _env_int("SENSORCFG_JSON_INDENT", DEFAULT_JSON_INDENT)
    )
    log_level: str = field(
        default_factory=lambda: os.getenv("SENSORCFG_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()
    )


def load_settings() -> EditorSettings:
    return EditorSettings()


def setup_logging(level=None):
    """Setup basic logging configuration"""
    if level is None:
        level = load_settings().log_level
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(levelname)s - %(name)s - %(message)s",
        handlers=[logging.StreamHandler()],
    )
    return logging.getLogger("sensorcfg")
