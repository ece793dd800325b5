"""
config.py - Process-wide configuration for default streams and sampling.

The active config is read once from the environment at import time and
can be replaced at runtime. Malformed variables are logged and defaults
are used instead. Default streams created afterwards, and sampler calls
made afterwards, see the new values.

Environment:
    ODDS_SEED       fixed seed for new default streams (decimal or 0x-hex)
    ODDS_SAMPLER    "multiply" (default) or "portable"
    ODDS_LOG_LEVEL  logging level name or number for the demo runner
"""

from __future__ import annotations

__all__ = ["SAMPLERS", "OddsConfig", "load_env_config", "get_config", "set_config", "configure",]

import os
import logging
from dataclasses import dataclass, replace
from typing import Mapping, Optional

from .validation import as_uint64

logger = logging.getLogger(__name__)

SAMPLERS = ("multiply", "portable")


@dataclass(frozen=True)
class OddsConfig:
    """Immutable library configuration."""
    seed: Optional[int] = None
    sampler: str = "multiply"
    logger_level: int = logging.INFO

    def __post_init__(self):
        if self.seed is not None:
            object.__setattr__(self, "seed", as_uint64(self.seed, "seed"))
        if self.sampler not in SAMPLERS:
            raise ValueError(f"sampler must be one of {SAMPLERS}, got {self.sampler!r}")
        if not isinstance(self.logger_level, int):
            raise TypeError(f"logger_level must be an int, not {type(self.logger_level).__name__}")

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> OddsConfig:
        """Build a config from ODDS_* environment variables.

        Raises:
            ValueError: a variable is malformed; the message names it.
        """
        env = os.environ if environ is None else environ
        seed = env.get("ODDS_SEED", "").strip()
        sampler = env.get("ODDS_SAMPLER", "").strip().lower()
        level = env.get("ODDS_LOG_LEVEL", "").strip()

        try:
            seed_val = as_uint64(int(seed, 0), "seed") if seed else None
        except ValueError as e:
            raise ValueError(f"ODDS_SEED={seed!r} is not a 64-bit unsigned integer: {e}") from e
        if sampler and sampler not in SAMPLERS:
            raise ValueError(f"ODDS_SAMPLER={sampler!r} must be one of {SAMPLERS}")
        try:
            level_val = _parse_level(level) if level else logging.INFO
        except ValueError as e:
            raise ValueError(f"ODDS_LOG_LEVEL={level!r}: {e}") from e

        return cls(seed=seed_val, sampler=sampler or "multiply", logger_level=level_val)


def _parse_level(level: str) -> int:
    if level.isdigit():
        return int(level)
    value = logging.getLevelName(level.upper())
    if not isinstance(value, int):
        raise ValueError(f"Unknown log level: {level!r}")
    return value


# =============================================================================
# Active config accessors
# =============================================================================
def load_env_config(environ: Optional[Mapping[str, str]] = None) -> OddsConfig:
    """Config from the environment; malformed values are logged and defaults used."""
    try:
        return OddsConfig.from_env(environ)
    except ValueError as e:
        logger.warning(f"Ignoring environment config, using defaults. {e}")
        return OddsConfig()


_active: OddsConfig = load_env_config()


def get_config() -> OddsConfig:
    return _active


def set_config(config: OddsConfig) -> OddsConfig:
    """Replace the active config; returns the previous one."""
    global _active
    if not isinstance(config, OddsConfig):
        raise TypeError(f"config must be an OddsConfig, not {type(config).__name__}")
    previous, _active = _active, config
    return previous


def configure(**changes) -> OddsConfig:
    """Update selected fields of the active config and return the new config."""
    set_config(replace(_active, **changes))
    return _active
