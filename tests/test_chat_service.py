# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-10-14
# Description: test_chat_service.py
# -----------------------------------------------------------------------------
import pytest

from services.GixQueryService import GixQueryService
from utility.errors import UpstreamError, ValidationError


def test_to_hits_flattens_chroma_response():
    raw = {
        "ids": [["text-a", "text-b"]],
        "metadatas": [[{"text": "alpha"}, None]],
        "distances": [[0.12, 0.5]],
    }

    hits = GixQueryService.to_hits(raw)

    assert hits == [
        {"id": "text-a", "score": 0.12, "metadata": {"text": "alpha"}},
        {"id": "text-b", "score": 0.5, "metadata": None},
    ]


def test_to_hits_empty_response():
    assert GixQueryService.to_hits({"ids": [[]], "metadatas": [[]], "distances": [[]]}) == []
    assert GixQueryService.to_hits({}) == []


def test_build_context_skips_missing_text():
    hits = [
        {"metadata": {"text": "one"}},
        {"metadata": None},
        {"metadata": {"text": ""}},
        {"metadata": {"text": "two"}},
    ]
    assert GixQueryService.build_context(hits) == "one\ntwo"


def test_ask_returns_first_choice_verbatim(chat_service, store, chat_client):
    store.matches = [{"metadata": {"text": "Gix2 makes developer tools."}}]
    chat_client.answer = "  Developer tools.\n"

    out = chat_service.ask("What does Gix2 make?")

    assert out["response"] == "  Developer tools.\n"
    assert out["sources"] == 1
    assert out["model"] == "fake-chat-model"


def test_ask_requests_top_five(chat_service, store):
    store.matches = [{"metadata": {"text": f"t{i}"}} for i in range(8)]

    chat_service.ask("anything")

    assert store.queries[0][1] == 5


def test_ask_rejects_empty_query(chat_service, embedder):
    with pytest.raises(ValidationError):
        chat_service.ask("")
    assert embedder.calls == []


def test_ask_accepts_whitespace_query(chat_service, store, chat_client):
    store.matches = [{"metadata": {"text": "context"}}]

    out = chat_service.ask("  ")

    assert out["response"] == chat_client.answer
    assert len(chat_client.calls) == 1


def test_ask_empty_choices_raises_upstream_error(chat_service, store, chat_client):
    store.matches = [{"metadata": {"text": "context"}}]
    chat_client.choices = False

    with pytest.raises(UpstreamError, match="empty response"):
        chat_service.ask("question")
