# settings.py
# Engine configuration, read from godojo.env via python-dotenv and the environment.
import logging
import os
from typing import Any, Dict, Optional

from dotenv import load_dotenv

DEFAULT_ENV_PATH = os.path.join(os.path.dirname(__file__), "godojo.env")


# Helpers to read env with defaults
def geti(name: str, default: int) -> int:
    v = os.getenv(name)
    if v is None or not v.strip():
        return int(default)
    try:
        return int(v)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {v!r}") from None


def getb(name: str, default: bool) -> bool:
    v = os.getenv(name)
    if v is None or not v.strip():
        return bool(default)
    v = v.strip().lower()
    if v in ("1", "true", "yes", "on"):
        return True
    if v in ("0", "false", "no", "off"):
        return False
    raise ValueError(f"{name} must be a boolean, got {v!r}")


def gets(name: str, default: str) -> str:
    v = os.getenv(name)
    return v if v is not None else default


def load_settings(env_path: Optional[str] = None) -> Dict[str, Any]:
    """
    Load the env file (if present) without overriding variables already set,
    then build the settings dict. GODOJO_ENV_FILE names an alternative file.
    """
    path = env_path or os.getenv("GODOJO_ENV_FILE") or DEFAULT_ENV_PATH
    if os.path.exists(path):
        load_dotenv(path, override=False)

    rules: Dict[str, Any] = {'env_path': path}
    rules['board_size'] = geti("GODOJO_BOARD_SIZE", 19)
    if rules['board_size'] < 1:
        raise ValueError(f"GODOJO_BOARD_SIZE must be at least 1, got {rules['board_size']}")
    rules['debug'] = getb("GODOJO_DEBUG", False)
    rules['log_level'] = gets("GODOJO_LOG_LEVEL", "WARNING").strip().upper()
    return rules


def configure_logging(rules: Optional[Dict[str, Any]] = None) -> logging.Logger:
    """Apply log_level / debug to the package logger and return it."""
    rules = rules if rules is not None else DEFAULT_RULES
    log = logging.getLogger("godojo")
    if rules.get('debug'):
        log.setLevel(logging.DEBUG)
    else:
        level = logging.getLevelName(rules.get('log_level', 'WARNING'))
        if not isinstance(level, int):
            raise ValueError(f"GODOJO_LOG_LEVEL is not a logging level: {rules.get('log_level')!r}")
        log.setLevel(level)
    return log


DEFAULT_RULES = load_settings()
