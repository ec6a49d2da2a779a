"""Parsing helpers for configuration values.

Environment flags and TOML values follow different rules:

- Environment capability flags are opt-out: an unset variable means enabled,
  and only the literal ``true`` (any case, surrounding whitespace ignored)
  enables a flag that is set.
- TOML values are usually real booleans, but string spellings are accepted.
"""

import logging
from typing import Any, Optional

logger = logging.getLogger(__name__)

_TRUE_VALUES = {"true", "1", "yes", "on"}
_FALSE_VALUES = {"false", "0", "no", "off"}
_VALID_LOG_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG", "NOTSET"}


def _parse_env_flag(value: Optional[str]) -> bool:
    if value is None:
        return True
    return value.strip().lower() == "true"


def _parse_bool(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    return str(value).strip().lower() in _TRUE_VALUES


def _try_parse_bool(value: Any) -> Optional[bool]:
    if isinstance(value, bool):
        return value
    normalized = str(value).strip().lower()
    if normalized in _TRUE_VALUES:
        return True
    if normalized in _FALSE_VALUES:
        return False
    return None


def _normalize_log_level(value: str) -> str:
    normalized = value.strip().upper()
    if normalized not in _VALID_LOG_LEVELS:
        logger.warning(
            "Invalid log level '%s'. Falling back to 'INFO'. Valid options: %s",
            value,
            ", ".join(sorted(_VALID_LOG_LEVELS)),
        )
        return "INFO"
    return normalized
