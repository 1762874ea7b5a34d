# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-10-12
# Description: errors.py
# -----------------------------------------------------------------------------


class GixError(Exception):
    """Base class for errors surfaced to API clients as {"error": message}."""

    status_code: int = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(GixError):
    """Malformed or missing request input (HTTP 400)."""

    status_code = 400


class UpstreamError(GixError):
    """OpenAI or Chroma failed, or returned something unusable (HTTP 500)."""

    status_code = 500
