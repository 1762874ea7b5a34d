# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-10-12
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


# -----------------------------------------------------------------------------
# HTTP server
# -----------------------------------------------------------------------------
HOST = _env("GIX_HOST", "0.0.0.0")
PORT = _env_int("PORT", 3001)


# -----------------------------------------------------------------------------
# Retrieval + chat defaults (env-controlled)
# -----------------------------------------------------------------------------
TOP_K = _env_int("GIX_TOP_K", 5)
CHAT_TEMPERATURE = _env_float("GIX_CHAT_TEMPERATURE", 0.0)
CHAT_MAX_TOKENS = _env_int("GIX_CHAT_MAX_TOKENS", 512)


# -----------------------------------------------------------------------------
# Sanity checks
# -----------------------------------------------------------------------------
if TOP_K < 1:
    raise RuntimeError(f"GIX_TOP_K must be >= 1, got {TOP_K}")

if not (0 < PORT < 65536):
    raise RuntimeError(f"PORT must be a valid TCP port, got {PORT}")
