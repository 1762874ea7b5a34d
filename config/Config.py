# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-10-12
# Description: Config
# -----------------------------------------------------------------------------

import os
from dataclasses import dataclass
from dotenv import load_dotenv, find_dotenv

# Load .env once globally
load_dotenv(find_dotenv(usecwd=True), override=False)


@dataclass(frozen=True)
class Config:
    # OpenAI (embeddings + chat)
    openai_api_key: str

    # Chroma Cloud (the vector index)
    chroma_api_key: str
    chroma_collection: str

    # Optional
    openai_base_url: str = ""
    openai_embed_model: str = "text-embedding-ada-002"
    openai_chat_model: str = "gpt-3.5-turbo"
    chroma_tenant: str = ""
    chroma_database: str = ""

    # ---- Single source of truth: field_name -> ENV VAR NAME ----
    ENV_VARS = {
        # OpenAI
        "openai_api_key": "OPENAI_API_KEY",
        "openai_base_url": "OPENAI_BASE_URL",      # e.g. https://api.openai.com/v1
        "openai_embed_model": "OPENAI_EMBED_MODEL",
        "openai_chat_model": "OPENAI_CHAT_MODEL",

        # Chroma
        "chroma_api_key": "CHROMA_API_KEY",
        "chroma_collection": "CHROMA_COLLECTION",
        "chroma_tenant": "CHROMA_TENANT",
        "chroma_database": "CHROMA_DATABASE",
    }

    REQUIRED_FIELDS = (
        "openai_api_key",
        "chroma_api_key",
        "chroma_collection",
    )

    @staticmethod
    def from_env() -> "Config":
        """Build Config object from environment variables (unset optionals keep their defaults)."""
        kwargs = {}
        for field_name, env_name in Config.ENV_VARS.items():
            value = (os.getenv(env_name) or "").strip()
            if value or field_name in Config.REQUIRED_FIELDS:
                kwargs[field_name] = value
        return Config(**kwargs)

    def __post_init__(self):
        """Fail fast if any required config is missing."""
        missing_fields = [f for f in self.REQUIRED_FIELDS if not getattr(self, f)]

        if missing_fields:
            missing_env_vars = [self.ENV_VARS[f] for f in missing_fields]
            raise ValueError(f"Missing required environment variables: {missing_env_vars}")

    def summary(self) -> dict:
        """Return a safe, non-sensitive summary for logging."""
        return {
            "openai_base_url": self.openai_base_url or "https://api.openai.com/v1",
            "openai_embed_model": self.openai_embed_model,
            "openai_chat_model": self.openai_chat_model,
            "chroma_collection": self.chroma_collection,
            "chroma_tenant": self.chroma_tenant or None,
            "chroma_database": self.chroma_database or None,
        }
