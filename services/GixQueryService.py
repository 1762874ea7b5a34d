# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-10-13
# Description: GixQueryService
# -----------------------------------------------------------------------------
from dataclasses import dataclass
from typing import Any, Dict, List, Sequence

from vectorstore.GixVectorStore import GixVectorStore


@dataclass
class GixQueryService:
    store: GixVectorStore
    n_results: int = 5

    def query(self, vector: Sequence[float]) -> Dict[str, Any]:
        return self.store.query_vector(vector, n_results=self.n_results)

    @staticmethod
    def to_hits(raw: Dict[str, Any]) -> List[Dict[str, Any]]:
        """
        Convert a Chroma-style response into a flat list of hits.
        Chroma returns ids / metadatas / distances as list-of-lists (one list
        per query embedding); only the first query is read.
        """
        ids = raw.get("ids") or [[]]
        metas = raw.get("metadatas") or [[]]
        dists = raw.get("distances") or [[]]

        ids0 = ids[0] if ids and isinstance(ids[0], list) else []
        metas0 = metas[0] if metas and isinstance(metas[0], list) else []
        dists0 = dists[0] if dists and isinstance(dists[0], list) else []

        hits: List[Dict[str, Any]] = []
        for i in range(max(len(ids0), len(metas0))):
            md = metas0[i] if i < len(metas0) else None
            dist = dists0[i] if i < len(dists0) else None
            hits.append({
                "id": ids0[i] if i < len(ids0) else None,
                "score": float(dist) if dist is not None else None,
                "metadata": md if isinstance(md, dict) else None,
            })

        return hits

    @staticmethod
    def build_context(hits: Sequence[Dict[str, Any]]) -> str:
        """Newline-join metadata.text of each hit, skipping hits without text."""
        texts = [(h.get("metadata") or {}).get("text") for h in hits]
        return "\n".join(t for t in texts if t)
