"""
Default settings, overridable through environment variables.
"""

import logging
import os
from typing import List

logger = logging.getLogger(__name__)

__all__ = [
    "DEFAULT_ITERATIONS",
    "DEFAULT_ROUNDS",
    "DEFAULT_SIZES",
    "RECLAIM_HEAP",
    "env_bool",
    "env_int",
    "env_int_list",
]


def env_bool(name: str, default: bool) -> bool:
    """Read a boolean flag from the environment."""
    raw = os.getenv(name, "").strip().lower()
    if not raw:
        return default
    if raw in ("1", "true", "yes", "on"):
        return True
    if raw in ("0", "false", "no", "off"):
        return False
    logger.warning("Ignoring invalid boolean for %s: %r", name, raw)
    return default


def env_int(name: str, default: int, minimum: int = 1) -> int:
    """Read an integer from the environment, falling back on bad values."""
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    try:
        value = int(raw)
    except ValueError:
        logger.warning("Ignoring invalid integer for %s: %r", name, raw)
        return default
    if value < minimum:
        logger.warning("Ignoring %s=%d, must be at least %d", name, value, minimum)
        return default
    return value


def env_int_list(name: str, default: List[int]) -> List[int]:
    """Read a comma-separated list of integers from the environment."""
    raw = os.getenv(name, "").strip()
    if not raw:
        return list(default)
    try:
        return [int(part) for part in raw.split(",") if part.strip()]
    except ValueError:
        logger.warning("Ignoring invalid integer list for %s: %r", name, raw)
        return list(default)


# Timed iterations per run
DEFAULT_ITERATIONS = env_int("MICRO_BENCH_ITERATIONS", 1000)
# Independent runs aggregated into one result
DEFAULT_ROUNDS = env_int("MICRO_BENCH_ROUNDS", 1)
# Problem sizes for registered workloads
DEFAULT_SIZES = env_int_list("MICRO_BENCH_SIZES", [1024, 4096, 16384])
# Run gc (and empty the CUDA cache) before timing
RECLAIM_HEAP = env_bool("MICRO_BENCH_RECLAIM_HEAP", default=True)
