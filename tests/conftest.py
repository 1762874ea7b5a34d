# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-10-14
# Description: conftest.py
# -----------------------------------------------------------------------------

import sys
from pathlib import Path
from types import SimpleNamespace
from typing import Any, Dict, List

import numpy as np
import pytest

# add project root to sys.path
ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT))

from api.dependencies import get_chat_service, get_health_service, get_ingest_service  # noqa: E402
from api.main import app  # noqa: E402
from services.GixChatService import GixChatService  # noqa: E402
from services.GixHealthService import GixHealthService  # noqa: E402
from services.GixIngestService import GixIngestService  # noqa: E402
from services.GixQueryService import GixQueryService  # noqa: E402


class FakeEmbedder:
    """Deterministic stand-in for GixEmbedder; every call is recorded."""

    def __init__(self, fail_on: str | None = None):
        self.calls: List[str] = []
        self.fail_on = fail_on

    def embed_text(self, text: str) -> np.ndarray:
        self.calls.append(text)
        if text == self.fail_on:
            raise RuntimeError(f"embedding failed for {text!r}")
        return np.asarray([float(len(text)), 0.1, -0.0123456789], dtype=np.float64)

    def healthcheck(self) -> bool:
        return self.fail_on != "ping"


class FakeStore:
    """Records upserts; query_vector returns whatever `matches` holds."""

    def __init__(self, matches: List[Dict[str, Any]] | None = None, healthy: bool = True):
        self.upserts = []
        self.queries = []
        self.matches = matches or []
        self.healthy = healthy

    def test_connection(self) -> bool:
        return self.healthy

    def upsert_record(self, record) -> None:
        self.upserts.append(record)

    def query_vector(self, vector, n_results: int = 5) -> Dict[str, Any]:
        self.queries.append((list(vector), n_results))
        matches = self.matches[:n_results]
        return {
            "ids": [[m.get("id", f"text-{i}") for i, m in enumerate(matches)]],
            "metadatas": [[m.get("metadata") for m in matches]],
            "distances": [[m.get("distance", 0.1) for m in matches]],
        }


class FakeChatClient:
    """Mimics OpenAIChat.chat(); returns a ChatCompletion-shaped object."""

    def __init__(self, answer: str = "Gix2 makes developer tools.", choices: bool = True):
        self.calls: List[List[Dict[str, str]]] = []
        self.answer = answer
        self.choices = choices

    def chat(self, messages, temperature: float = 0.0, max_tokens: int = 512):
        self.calls.append(messages)
        choices = [SimpleNamespace(message=SimpleNamespace(content=self.answer))] if self.choices else []
        return SimpleNamespace(choices=choices, model="fake-chat-model", usage=None)

    def healthcheck(self) -> bool:
        return True


@pytest.fixture
def embedder() -> FakeEmbedder:
    return FakeEmbedder()


@pytest.fixture
def store() -> FakeStore:
    return FakeStore()


@pytest.fixture
def chat_client() -> FakeChatClient:
    return FakeChatClient()


@pytest.fixture
def chat_service(embedder, store, chat_client) -> GixChatService:
    return GixChatService(
        embedder=embedder,
        query_service=GixQueryService(store=store, n_results=5),
        chat_client=chat_client,
    )


@pytest.fixture
def client(embedder, store, chat_client, chat_service):
    """TestClient wired to the fakes through FastAPI dependency overrides."""
    from starlette.testclient import TestClient

    app.dependency_overrides[get_ingest_service] = lambda: GixIngestService(embedder=embedder, store=store)
    app.dependency_overrides[get_chat_service] = lambda: chat_service
    app.dependency_overrides[get_health_service] = lambda: GixHealthService(store=store, embedder=embedder, chat_client=chat_client)
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
