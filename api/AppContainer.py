# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-10-13
# Description: AppContainer.py
# -----------------------------------------------------------------------------
from functools import lru_cache

import settings
from chat.OpenAIChat import OpenAIChat
from config.Config import Config
from embedding.GixEmbedder import GixEmbedder
from services.GixChatService import GixChatService
from services.GixHealthService import GixHealthService
from services.GixIngestService import GixIngestService
from services.GixQueryService import GixQueryService
from utility.logging_utils import get_class_logger
from vectorstore.ChromaGixVectorStore import ChromaGixVectorStore


class AppContainer:
    """
    Owns client instantiation and application wiring.
    Built once per process; the clients are shared read-only by all requests.
    Singleton instances are provided via FastAPI dependencies.
    """

    def __init__(self, cfg: Config | None = None) -> None:
        # Configuration
        self.cfg = cfg or Config.from_env()
        self.logger = get_class_logger(self.__class__)
        self.logger.info("Building AppContainer: %s", self.cfg.summary())

        # Core infrastructure
        self.embedder = GixEmbedder(cfg=self.cfg)
        self.store = ChromaGixVectorStore(cfg=self.cfg)
        self.openai_chat = OpenAIChat(cfg=self.cfg)

        # Return a singleton GixIngestService instance
        self.ingest_service = GixIngestService(
            embedder=self.embedder,
            store=self.store,
        )

        # Return a singleton GixQueryService instance
        self.query_service = GixQueryService(
            store=self.store,
            n_results=settings.TOP_K,
        )

        # Return a singleton GixChatService instance
        self.chat_service = GixChatService(
            embedder=self.embedder,
            query_service=self.query_service,
            chat_client=self.openai_chat,
            temperature=settings.CHAT_TEMPERATURE,
            max_tokens=settings.CHAT_MAX_TOKENS,
        )

        # Return a singleton GixHealthService instance
        self.health_service = GixHealthService(
            store=self.store,
            embedder=self.embedder,
            chat_client=self.openai_chat,
        )


@lru_cache
def get_app_container() -> AppContainer:
    return AppContainer()
