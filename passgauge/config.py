# passgauge/config.py
"""
Pattern configuration for the evaluator.

The denylist and keyboard-pattern list are immutable data handed to
StrengthEvaluator at construction. They can be extended or replaced from a
JSON file stored in %APPDATA%/PassGauge/patterns.json (Windows) or
~/.passgauge/patterns.json (fallback), or from any path given explicitly.
"""

import logging
import os
from dataclasses import dataclass, replace
from typing import Any, Dict, FrozenSet, Iterable, Optional, Tuple

from .storage import atomic_write_bytes, dump_json_bytes, read_bytes, read_json_bytes

logger = logging.getLogger(__name__)

DEFAULT_COMMON_PASSWORDS: Tuple[str, ...] = (
    "password", "123456", "12345678", "qwerty", "abc123", "letmein",
    "welcome", "monkey", "111111", "password123", "admin", "login",
    "welcome123", "guest", "master", "hello", "hello123", "123123",
)

# adjacent-key runs; checked in this order, first hit wins
DEFAULT_KEYBOARD_PATTERNS: Tuple[str, ...] = (
    "qwerty", "asdfgh", "zxcvbn", "qazwsx", "123456", "098765",
    "qwertyuiop", "asdfghjkl", "zxcvbnm",
)


class ConfigError(ValueError):
    """Raised when a pattern file cannot be read or has the wrong shape."""


@dataclass(frozen=True)
class PatternConfig:
    common_passwords: FrozenSet[str]
    keyboard_patterns: Tuple[str, ...]
    neutral_fallback: bool = True

    def __post_init__(self):
        # lowercase, drop blanks, freeze; holds for direct construction too
        object.__setattr__(self, "common_passwords", frozenset(_normalize(self.common_passwords)))
        object.__setattr__(self, "keyboard_patterns", _normalize(self.keyboard_patterns))

    @classmethod
    def build(
        cls,
        common_passwords: Iterable[str] = DEFAULT_COMMON_PASSWORDS,
        keyboard_patterns: Iterable[str] = DEFAULT_KEYBOARD_PATTERNS,
        neutral_fallback: bool = True,
    ) -> "PatternConfig":
        """Defaults for anything not given; entries are normalized in __post_init__."""
        return cls(
            common_passwords=common_passwords,
            keyboard_patterns=keyboard_patterns,
            neutral_fallback=neutral_fallback,
        )

    def extended(
        self,
        common_passwords: Iterable[str] = (),
        keyboard_patterns: Iterable[str] = (),
    ) -> "PatternConfig":
        return replace(
            self,
            common_passwords=self.common_passwords | frozenset(common_passwords),
            keyboard_patterns=self.keyboard_patterns + tuple(keyboard_patterns),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "common_passwords": sorted(self.common_passwords),
            "keyboard_patterns": list(self.keyboard_patterns),
            "neutral_fallback": self.neutral_fallback,
        }


def _normalize(entries: Iterable[str]) -> Tuple[str, ...]:
    return tuple(dict.fromkeys(e.lower() for e in entries if e))


def default_config() -> PatternConfig:
    return PatternConfig.build()


def _appdata_dir() -> str:
    appdata = os.getenv("APPDATA")
    if appdata:
        return os.path.join(appdata, "PassGauge")
    return os.path.join(os.path.expanduser("~"), ".passgauge")


def config_path() -> str:
    return os.path.join(_appdata_dir(), "patterns.json")


def _string_list(data: Dict[str, Any], key: str) -> Optional[list]:
    value = data.get(key)
    if value is None:
        return None
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise ConfigError(f"'{key}' must be a list of strings")
    return value


def config_from_dict(data: Dict[str, Any]) -> PatternConfig:
    """
    Build a PatternConfig from parsed JSON. 'common_passwords' and
    'keyboard_patterns' replace the defaults, 'extra_*' keys extend them.
    """
    if not isinstance(data, dict):
        raise ConfigError("pattern config must be a JSON object")

    common = _string_list(data, "common_passwords")
    keyboard = _string_list(data, "keyboard_patterns")
    fallback = data.get("neutral_fallback", True)
    if not isinstance(fallback, bool):
        raise ConfigError("'neutral_fallback' must be true or false")

    cfg = PatternConfig.build(
        common_passwords=DEFAULT_COMMON_PASSWORDS if common is None else common,
        keyboard_patterns=DEFAULT_KEYBOARD_PATTERNS if keyboard is None else keyboard,
        neutral_fallback=fallback,
    )
    return cfg.extended(
        common_passwords=_string_list(data, "extra_common_passwords") or (),
        keyboard_patterns=_string_list(data, "extra_keyboard_patterns") or (),
    )


def load_config(path: Optional[str] = None) -> PatternConfig:
    """
    Load pattern config from 'path' (default: config_path()).
    A missing file gives the built-in defaults; a malformed one raises ConfigError.
    """
    p = path or config_path()
    if not os.path.exists(p):
        logger.debug("no pattern file at %s, using defaults", p)
        return default_config()
    try:
        data = read_json_bytes(read_bytes(p))
    except (OSError, UnicodeDecodeError, ValueError) as e:
        raise ConfigError(f"cannot read pattern file {p}: {e}") from e
    cfg = config_from_dict(data)
    logger.debug(
        "loaded %d common passwords and %d keyboard patterns from %s",
        len(cfg.common_passwords), len(cfg.keyboard_patterns), p,
    )
    return cfg


def save_config(cfg: PatternConfig, path: Optional[str] = None) -> str:
    p = path or config_path()
    atomic_write_bytes(p, dump_json_bytes(cfg.to_dict()))
    logger.debug("wrote pattern config to %s", p)
    return p
