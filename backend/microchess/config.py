from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

MIN_DEPTH = 1
MAX_DEPTH = 6


def validate_depth(depth: object) -> int:
    if isinstance(depth, bool) or not isinstance(depth, int) or not MIN_DEPTH <= depth <= MAX_DEPTH:
        raise ValueError(f"Depth must be between {MIN_DEPTH} and {MAX_DEPTH}")
    return depth


def validate_log_level(level: object) -> str:
    name = str(level).strip().upper()
    if not isinstance(logging.getLevelName(name), int):
        raise ValueError(f"Unknown log level: {level!r}")
    return name


def _env_int(environ: Mapping[str, str], key: str, default: int) -> int:
    raw = environ.get(key)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{key} must be an integer, got {raw!r}") from None


@dataclass
class EngineConfig:
    depth: int = 3
    hint_depth: int = 2
    log_level: str = "WARNING"

    def __post_init__(self) -> None:
        validate_depth(self.depth)
        validate_depth(self.hint_depth)
        self.log_level = validate_log_level(self.log_level)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "EngineConfig":
        env = os.environ if environ is None else environ
        return cls(
            depth=_env_int(env, "MICROCHESS_DEPTH", cls.depth),
            hint_depth=_env_int(env, "MICROCHESS_HINT_DEPTH", cls.hint_depth),
            log_level=env.get("MICROCHESS_LOG_LEVEL", cls.log_level),
        )
