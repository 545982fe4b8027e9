"""
Configuration constants for the memoization benchmark.

All labels, defaults, and tunable parameters are defined here.
Overrides are read from environment variables (or a .env file at the
project root).
"""

import os
from pathlib import Path

from dotenv import load_dotenv

# =============================================================================
# Path Configuration
# =============================================================================

# Project root is parent of memobench/
PROJECT_ROOT = Path(__file__).parent.parent

# Load environment variables
load_dotenv(PROJECT_ROOT / ".env")

# =============================================================================
# Measurement Configuration
# =============================================================================

# Every Measurement and every fasterBy value is expressed in this unit
TIME_UNIT = "ms"

# =============================================================================
# Report Configuration
# =============================================================================

# Label for direct invocation vs. the first (cache miss) memoized call
DIRECT_VS_MEMO_SETUP_LABEL = "Function versus memoisation process"

# Label for direct invocation vs. reading the already cached value
DIRECT_VS_CACHED_ACCESS_LABEL = "Function call versus calling memoised function"

# JSON indentation used when printing verdicts
REPORT_INDENT = 4

# Sinks that deliver verdicts somewhere a person can read them
OUTPUT_SINKS = ("console", "log")

# Output sink used when none is passed explicitly (console, log)
DEFAULT_SINK = os.environ.get("MEMOBENCH_SINK", "console")

# =============================================================================
# Cache Configuration
# =============================================================================

# Maximum number of memoized functions kept alive (empty = unbounded)
CACHE_MAXSIZE_SETTING = os.environ.get("MEMOBENCH_CACHE_MAXSIZE", "").strip()

# =============================================================================
# Workload Configuration
# =============================================================================

# Workload used by scripts/run_benchmark.py when none is given
DEFAULT_WORKLOAD = "sleep"

# Duration of the sleep / busy-wait workloads in milliseconds
DEFAULT_WORKLOAD_MS = 5.0

# Number of elements sorted by the sort workload
DEFAULT_SORT_SIZE = 100_000

# =============================================================================
# Logging Configuration
# =============================================================================

# Log level (DEBUG, INFO, WARNING, ERROR)
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_DATEFMT = "%H:%M:%S"

# =============================================================================
# Validation Helpers
# =============================================================================

def get_cache_maxsize() -> int | None:
    """
    Parse MEMOBENCH_CACHE_MAXSIZE.

    Returns:
        None when unset, otherwise the configured bound

    Raises:
        ValueError: If the setting is not a positive integer
    """
    if not CACHE_MAXSIZE_SETTING:
        return None
    if not CACHE_MAXSIZE_SETTING.isdigit() or int(CACHE_MAXSIZE_SETTING) < 1:
        raise ValueError(
            f"MEMOBENCH_CACHE_MAXSIZE must be a positive integer, got {CACHE_MAXSIZE_SETTING!r}"
        )
    return int(CACHE_MAXSIZE_SETTING)
