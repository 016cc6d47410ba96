"""
Score Kernel — Runtime Settings

Read from the environment. A ``.env`` file in the working directory is
loaded first when present; variables already set in the environment win.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from dotenv import load_dotenv

_LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})


@dataclass(frozen=True)
class KernelSettings:
    """Settings for the CLI and the determinism harness."""

    log_level: str = "WARNING"
    hard_levels: int = 1
    soft_levels: int = 1
    harness_seed: int = 42


def load_settings(
    environ: Optional[Mapping[str, str]] = None,
    env_file: Optional[str] = ".env",
) -> KernelSettings:
    """
    Build KernelSettings from SCORE_KERNEL_* variables.

    Pass ``environ`` to read from a mapping instead of os.environ
    (no .env loading happens then).
    """
    if environ is None:
        if env_file and os.path.exists(env_file):
            load_dotenv(env_file)
        environ = os.environ

    log_level = environ.get("SCORE_KERNEL_LOG_LEVEL", "WARNING").upper()
    if log_level not in _LOG_LEVELS:
        raise ValueError(
            f"SCORE_KERNEL_LOG_LEVEL must be one of {sorted(_LOG_LEVELS)}, "
            f"got {log_level!r}"
        )

    return KernelSettings(
        log_level=log_level,
        hard_levels=_read_int(environ, "SCORE_KERNEL_HARD_LEVELS", 1, minimum=0),
        soft_levels=_read_int(environ, "SCORE_KERNEL_SOFT_LEVELS", 1, minimum=0),
        harness_seed=_read_int(environ, "SCORE_KERNEL_HARNESS_SEED", 42),
    )


def _read_int(
    environ: Mapping[str, str],
    name: str,
    default: int,
    minimum: Optional[int] = None,
) -> int:
    raw = environ.get(name)
    if raw is None or raw == "":
        return default
    try:
        value = int(raw)
    except ValueError as exc:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from exc
    if minimum is not None and value < minimum:
        raise ValueError(f"{name} must be >= {minimum}, got {value}")
    return value
