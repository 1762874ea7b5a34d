# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-10-13
# Description: error.py
# -----------------------------------------------------------------------------
from pydantic import BaseModel


class ErrorResponse(BaseModel):
    error: str
