# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-10-12
# Description: EmbeddingRecord
# -----------------------------------------------------------------------------
import uuid
from dataclasses import dataclass, field
from typing import Dict, Any, List

import numpy as np


def new_record_id() -> str:
    return f"text-{uuid.uuid4().hex}"


@dataclass
class EmbeddingRecord:
    """Embedding vector + searchable metadata ({"text": ...}) as stored in the index."""
    vector: np.ndarray
    metadata: Dict[str, Any]
    id: str = field(default_factory=new_record_id)

    @classmethod
    def for_text(cls, text: str, vector: np.ndarray) -> "EmbeddingRecord":
        return cls(vector=vector, metadata={"text": text})

    @property
    def text(self) -> str:
        return self.metadata.get("text", "")

    def values(self) -> List[float]:
        return self.vector.tolist() if hasattr(self.vector, "tolist") else list(self.vector)
