# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-10-13
# Description: api/schemas/embed.py
# -----------------------------------------------------------------------------
from typing import List

from pydantic import BaseModel, StrictStr


class TextItem(BaseModel):
    text: StrictStr


class EmbeddedText(BaseModel):
    text: str
    embedding: List[float]


class EmbedResponse(BaseModel):
    message: str = "Texts embedded successfully"
    embeddings: List[EmbeddedText]
