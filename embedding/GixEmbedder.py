# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-10-12
# Description: GixEmbedder
# -----------------------------------------------------------------------------
from typing import Sequence

import numpy as np
from openai import OpenAI

from config.Config import Config
from utility.errors import UpstreamError
from utility.logging_utils import get_class_logger


class GixEmbedder:
    """
    Thin wrapper over the OpenAI embeddings endpoint.
    One request per call; no batching and no retries.
    """

    def __init__(self, cfg: Config, *, client=None, logger=None):
        self.cfg = cfg
        self.logger = logger or get_class_logger(self.__class__)

        self.client = client or OpenAI(
            api_key=cfg.openai_api_key,
            base_url=cfg.openai_base_url or None,
        )
        self.model = cfg.openai_embed_model
        self.logger.info("OpenAI Embedder initialised (model=%s)", self.model)

    def _embed(self, texts: Sequence[str]) -> np.ndarray:
        resp = self.client.embeddings.create(model=self.model, input=list(texts))

        data = getattr(resp, "data", None) or []
        if len(data) != len(texts):
            raise UpstreamError(
                f"OpenAI returned {len(data)} embeddings for {len(texts)} inputs"
            )

        # float64: vectors round-trip exactly as OpenAI sent them
        arr = np.asarray([d.embedding for d in data], dtype=np.float64)
        if arr.ndim != 2 or arr.shape[1] == 0:
            raise UpstreamError("OpenAI returned an empty embedding")

        self.logger.debug("Embedded %d text(s) (dim=%d)", arr.shape[0], arr.shape[1])
        return arr

    def embed_text(self, text: str) -> np.ndarray:
        """Embed a single text and return its vector."""
        return self._embed([text])[0]

    def healthcheck(self) -> bool:
        try:
            _ = self.embed_text("ping")
            return True
        except Exception as e:
            self.logger.warning("Embedding healthcheck failed: %s", e)
            return False
