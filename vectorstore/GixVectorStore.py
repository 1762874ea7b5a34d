# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-10-12
# Description: GixVectorStore
# -----------------------------------------------------------------------------

from typing import Protocol, Sequence, Dict, Any, runtime_checkable

from embedding.EmbeddingRecord import EmbeddingRecord


@runtime_checkable
class GixVectorStore(Protocol):
    def test_connection(self) -> bool:
        ...

    def upsert_record(self, record: EmbeddingRecord) -> None:
        ...

    def query_vector(
            self,
            vector: Sequence[float],
            n_results: int = 5,
    ) -> Dict[str, Any]:
        ...
