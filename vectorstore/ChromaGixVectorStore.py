# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-10-12
# Description: ChromaGixVectorStore
# -----------------------------------------------------------------------------
from dataclasses import dataclass
from typing import Sequence, Dict, Any

import chromadb
from chromadb import ClientAPI
from chromadb.api.models.Collection import Collection

from config.Config import Config
from embedding.EmbeddingRecord import EmbeddingRecord
from utility.logging_utils import get_class_logger
from vectorstore.GixVectorStore import GixVectorStore


@dataclass
class ChromaGixVectorStore(GixVectorStore):
    """
    Chroma Cloud collection used as the managed vector index.
    Stores one record per ingested text with metadata {"text": ...}.
    """
    cfg: Config
    logger: Any = None

    def __post_init__(self) -> None:
        self.logger = self.logger or get_class_logger(self.__class__)
        self.collection_name = self.cfg.chroma_collection

        self.logger.info(
            "Initialising Chroma Cloud client (tenant=%s, database=%s)",
            self.cfg.chroma_tenant or "<from api key>",
            self.cfg.chroma_database or "<from api key>",
        )

        self.client: ClientAPI = chromadb.CloudClient(
            tenant=self.cfg.chroma_tenant or None,
            database=self.cfg.chroma_database or None,
            api_key=self.cfg.chroma_api_key,
        )

        self.collection: Collection = self.client.get_or_create_collection(
            name=self.collection_name
        )
        self.logger.info("Chroma collection ready: '%s'", self.collection_name)

    def test_connection(self) -> bool:
        """
        Simple health check: can we talk to Chroma and our collection?
        """
        try:
            # count() is cheap and exercises the connection + auth
            _ = self.collection.count()
            return True
        except Exception as e:
            self.logger.error("Chroma connection failed: %s", e)
            return False

    def upsert_record(self, record: EmbeddingRecord) -> None:
        self.collection.upsert(
            ids=[record.id],
            embeddings=[record.values()],
            metadatas=[record.metadata],
        )
        self.logger.info(
            "Upserted record '%s' into Chroma collection '%s'",
            record.id,
            self.collection_name,
        )

    def query_vector(
            self,
            vector: Sequence[float],
            n_results: int = 5,
    ) -> Dict[str, Any]:
        """
        Top-k similarity query. Returns the raw Chroma response
        (ids / metadatas / distances as list-of-lists, one list per query).
        Raw vectors are not requested.
        """
        if hasattr(vector, "tolist"):
            vector = vector.tolist()

        self.logger.info(
            "Querying Chroma collection '%s' (n_results=%d)",
            self.collection_name,
            n_results,
        )

        try:
            res = self.collection.query(
                query_embeddings=[list(vector)],
                n_results=n_results,
                include=["metadatas", "distances"],
            )
        except Exception as e:
            self.logger.error("Error during query_vector execution: %s", e, exc_info=True)
            raise

        ids = res.get("ids") or [[]]
        self.logger.info(
            "Chroma search complete: returned %d results (requested %d)",
            len(ids[0]) if ids else 0,
            n_results,
        )
        return res
