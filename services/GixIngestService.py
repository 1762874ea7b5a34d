# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-10-13
# Description: GixIngestService.py
# -----------------------------------------------------------------------------
from __future__ import annotations

import logging
from typing import Any, Dict, List, Sequence

from embedding.EmbeddingRecord import EmbeddingRecord
from embedding.GixEmbedder import GixEmbedder
from utility.errors import ValidationError
from utility.logging_utils import get_class_logger
from vectorstore.GixVectorStore import GixVectorStore


class GixIngestService:
    """
    Owns the embed/index pipeline:
      - embed each text (one OpenAI call per text)
      - upsert one record per text into the vector store
    Items are processed strictly in input order. A failure stops the loop;
    records upserted before the failure stay in the index.
    """

    def __init__(
        self,
        *,
        embedder: GixEmbedder,
        store: GixVectorStore,
        logger: logging.Logger | None = None,
    ) -> None:
        self.embedder = embedder
        self.store = store
        self.logger = logger or get_class_logger(self.__class__)

    def ingest(self, texts: Sequence[str]) -> List[Dict[str, Any]]:
        """
        Returns [{"text": ..., "embedding": [...]}, ...] in input order.
        """
        if not texts:
            raise ValidationError("texts must be a non-empty list")

        self.logger.info("ingest: %d text(s) (start)", len(texts))

        out: List[Dict[str, Any]] = []
        for i, text in enumerate(texts):
            vector = self.embedder.embed_text(text)
            record = EmbeddingRecord.for_text(text, vector)

            self.store.upsert_record(record)

            self.logger.debug("ingest: item %d stored as id=%s", i, record.id)
            out.append({"text": text, "embedding": record.values()})

        self.logger.info("ingest: %d record(s) upserted (done)", len(out))
        return out
