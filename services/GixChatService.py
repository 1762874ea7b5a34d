# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-10-13
# Description: GixChatService.py
# -----------------------------------------------------------------------------
import logging
from dataclasses import dataclass
from typing import Any, Dict, List

from chat.OpenAIChat import OpenAIChat, Message
from embedding.GixEmbedder import GixEmbedder
from services.GixQueryService import GixQueryService
from utility.errors import UpstreamError, ValidationError
from utility.logging_utils import get_class_logger

NO_CONTEXT_ANSWER = "No relevant context found."
OUT_OF_SCOPE_ANSWER = "I can only answer questions related to Gix2 Software."

SYSTEM_PROMPT = (
    "You are the AI chatbot of Gix2 Software. "
    "Only answer based on the provided company knowledge and context. "
    f"If you don't know the answer, reply with: '{OUT_OF_SCOPE_ANSWER}'"
)


@dataclass
class GixChatService:
    """
    Chat Service:
        - embeds the user query with GixEmbedder
        - retrieves the nearest stored texts using GixQueryService
        - builds a system instruction + context prompt
        - calls OpenAIChat to generate the answer
    Every call is independent; no conversation history is kept.
    """
    embedder: GixEmbedder
    query_service: GixQueryService
    chat_client: OpenAIChat
    temperature: float = 0.0
    max_tokens: int = 512
    logger: logging.Logger | None = None

    def __post_init__(self) -> None:
        self.logger = self.logger or get_class_logger(self.__class__)
        self.logger.info(
            "GixChatService initialised (query_service=%s chat_client=%s)",
            type(self.query_service).__name__,
            type(self.chat_client).__name__,
        )

    def ask(self, query: str) -> Dict[str, Any]:
        """
            Returns:
            {
                "response": str,
                "sources": int,        # hits that contributed context
                "model": str|None,     # None when the LLM was not called
            }
        """
        if not query:
            raise ValidationError("Invalid query input")

        self.logger.info("ask: query='%s' (start)", query[:120])

        vector = self.embedder.embed_text(query)

        raw = self.query_service.query(vector)
        hits = self.query_service.to_hits(raw)
        self.logger.info("ask: retrieved hits=%d", len(hits))

        if not hits:
            return {"response": NO_CONTEXT_ANSWER, "sources": 0, "model": None}

        context = self.query_service.build_context(hits)
        if not context:
            self.logger.warning("ask: all %d hits had empty text", len(hits))
            return {"response": OUT_OF_SCOPE_ANSWER, "sources": 0, "model": None}

        self.logger.debug("ask: context_chars=%d", len(context))

        messages = self.build_messages(context=context, query=query)
        resp = self.chat_client.chat(
            messages,
            temperature=self.temperature,
            max_tokens=self.max_tokens,
        )

        choices = getattr(resp, "choices", None)
        if not choices:
            raise UpstreamError("OpenAI returned an empty response")

        try:
            answer = choices[0].message.content or ""
        except AttributeError as e:
            self.logger.error("ask: unexpected OpenAI response: %s", e, exc_info=True)
            raise UpstreamError(f"Unexpected OpenAI response format: {e}") from e

        self.logger.info("ask: answer_chars=%d (done)", len(answer))

        return {
            "response": answer,
            "sources": sum(1 for h in hits if (h.get("metadata") or {}).get("text")),
            "model": getattr(resp, "model", None),
        }

    @staticmethod
    def build_messages(*, context: str, query: str) -> List[Message]:
        return [
            {"role": "system", "content": SYSTEM_PROMPT},
            {"role": "user", "content": f"Context: {context}\n\nQuestion: {query}"},
        ]
