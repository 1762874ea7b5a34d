# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-10-13
# Description: health.py
# -----------------------------------------------------------------------------
from typing import Dict

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    status: str
    message: str


class SmokeTestSummary(BaseModel):
    total: int = 0
    passed: int = 0
    failed: int = 0


class DeepHealthResponse(BaseModel):
    """status is "ok" only when every smoke check passed."""
    status: str
    results: Dict[str, bool] = Field(default_factory=dict)  # check name -> passed
    summary: SmokeTestSummary
