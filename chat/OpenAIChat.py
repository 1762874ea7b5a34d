# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-10-12
# Description: OpenAIChat
# -----------------------------------------------------------------------------
from dataclasses import dataclass
from typing import Dict, Any, List

from openai import OpenAI

from utility.logging_utils import get_class_logger

Message = Dict[str, str]  # {"role": "system"|"user", "content": "..."}


@dataclass
class OpenAIChat:
    """
        OpenAI chat-completions wrapper.

        Expected Config fields:
          cfg.openai_api_key: str
          cfg.openai_base_url: str (optional, "" means the public endpoint)
          cfg.openai_chat_model: str  (e.g. "gpt-3.5-turbo", "gpt-4o-mini")
    """

    cfg: Any
    client: Any = None
    logger: Any = None

    def __post_init__(self) -> None:
        self.logger = self.logger or get_class_logger(self.__class__)

        if not getattr(self.cfg, "openai_api_key", None):
            raise ValueError("Config is missing openai_api_key")

        self.model = getattr(self.cfg, "openai_chat_model", None)
        if not self.model:
            raise ValueError("Config missing openai_chat_model.")

        self.client = self.client or OpenAI(
            api_key=self.cfg.openai_api_key,
            base_url=getattr(self.cfg, "openai_base_url", None) or None,
        )

        self.logger.info("OpenAIChat initialised (model=%s)", self.model)

    def chat(
            self,
            messages: List[Message],
            temperature: float = 0.0,
            max_tokens: int = 512,
    ) -> Any:
        if not messages:
            raise ValueError("messages must be non-empty.")

        params: Dict[str, Any] = {
            "model": self.model,
            "messages": messages,
            "temperature": temperature,
            "max_tokens": max_tokens,
        }

        self.logger.debug(
            "Chat request: model=%s temp=%s max_tokens=%s messages=%d",
            self.model, temperature, max_tokens, len(messages)
        )

        resp = self.client.chat.completions.create(**params)

        self.logger.debug("Raw ChatCompletion response: %r", resp)

        # Return the full response object (NOT just the content)
        return resp

    def healthcheck(self) -> bool:
        try:
            resp = self.chat(
                [{"role": "user", "content": "ping"}],
                max_tokens=5,
                temperature=0.0,
            )
            return bool(getattr(resp, "choices", None))
        except Exception as e:
            self.logger.warning("Chat healthcheck failed: %s", e)
            return False
