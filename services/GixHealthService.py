# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-10-13
# Description: GixHealthService.py
# -----------------------------------------------------------------------------
from dataclasses import dataclass
from typing import Dict

from api.schemas.health import DeepHealthResponse, SmokeTestSummary
from chat.OpenAIChat import OpenAIChat
from embedding.GixEmbedder import GixEmbedder
from vectorstore.GixVectorStore import GixVectorStore


@dataclass
class GixHealthService:
    """
    Runs smoke tests against the external collaborators:
      - chroma:       collection count() (always)
      - openai_embed: one embedding call (run_openai only, billed)
      - openai_chat:  one tiny completion (run_openai only, billed)
    Returns DeepHealthResponse for API layer
    """

    store: GixVectorStore
    embedder: GixEmbedder
    chat_client: OpenAIChat

    def deep_health(self, run_openai: bool = False) -> DeepHealthResponse:
        results: Dict[str, bool] = {"chroma": self.store.test_connection()}
        if run_openai:
            results["openai_embed"] = self.embedder.healthcheck()
            results["openai_chat"] = self.chat_client.healthcheck()

        total = len(results)
        passed = sum(1 for ok in results.values() if ok)
        failed = total - passed

        return DeepHealthResponse(
            status="ok" if failed == 0 else "error",
            results=results,
            summary=SmokeTestSummary(total=total, passed=passed, failed=failed),
        )
