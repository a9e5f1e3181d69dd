# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-02-02
# Updated: 2026-02-19
# Description: settings.py
# -----------------------------------------------------------------------------
import os


def _env(name: str, default: str = "") -> str:
    """Read env var safely and strip whitespace."""
    return (os.getenv(name) or default).strip()


def _env_int(name: str, default: int) -> int:
    v = _env(name, "")
    if v == "":
        return default
    try:
        return int(v)
    except ValueError as e:
        raise RuntimeError(f"Env var {name} must be an int, got {v!r}") from e


def _env_float(name: str, default: float) -> float:
    v = _env(name, "")
    if v == "":
        return default
    try:
        return float(v)
    except ValueError as e:
        raise RuntimeError(f"Env var {name} must be a float, got {v!r}") from e


def _env_bool(name: str, default: bool) -> bool:
    v = _env(name, "")
    if v == "":
        return default
    v = v.lower()
    if v in ("1", "true", "t", "yes", "y", "on"):
        return True
    if v in ("0", "false", "f", "no", "n", "off"):
        return False
    raise RuntimeError(f"Env var {name} must be a boolean, got {v!r}")


# -----------------------------------------------------------------------------
# Retrieval defaults
# -----------------------------------------------------------------------------
DEFAULT_TOP_K = _env_int("UDL_DEFAULT_TOP_K", 3)

# Inputs per embeddings request; batches are sent one at a time
EMBED_BATCH_SIZE = _env_int("UDL_EMBED_BATCH_SIZE", 64)


# -----------------------------------------------------------------------------
# Timing
# -----------------------------------------------------------------------------
# Deadline the HTTP caller applies around a guideline search
SEARCH_TIMEOUT_SECONDS = _env_float("UDL_SEARCH_TIMEOUT_SECONDS", 30.0)

# Searches slower than this are logged as warnings
SLOW_SEARCH_WARN_SECONDS = _env_float("UDL_SLOW_SEARCH_WARN_SECONDS", 2.0)

# Build (or load) the vector store when the API process starts
WARM_ON_STARTUP = _env_bool("UDL_WARM_ON_STARTUP", False)


# -----------------------------------------------------------------------------
# Sanity checks (tunable)
# -----------------------------------------------------------------------------
if DEFAULT_TOP_K < 1:
    raise RuntimeError("DEFAULT_TOP_K must be >= 1")

if EMBED_BATCH_SIZE < 1:
    raise RuntimeError("EMBED_BATCH_SIZE must be >= 1")

if SEARCH_TIMEOUT_SECONDS <= 0:
    raise RuntimeError("SEARCH_TIMEOUT_SECONDS must be > 0")
