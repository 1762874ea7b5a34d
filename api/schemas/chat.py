# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-10-13
# Description: api/schemas/chat.py
# -----------------------------------------------------------------------------
from pydantic import BaseModel, StrictStr


class ChatRequest(BaseModel):
    query: StrictStr


class ChatResponse(BaseModel):
    response: str
