import logging
from typing import Optional

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Runtime configuration, read from the environment and an optional `.env`.

    LLM_PROVIDER accepts "gemini", "ollama", "demo", or a fully-qualified
    LlamaIndex LLM class such as "llama_index.llms.anthropic.Anthropic".
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    LLM_PROVIDER: str = "gemini"
    LL_MODEL: str = "gemini-2.0-flash"
    LLM_API_KEY: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("LLM_API_KEY", "GEMINI_API_KEY"),
    )
    LLM_BASE_URL: Optional[str] = None
    LLM_TEMPERATURE: float = 0.3
    LLM_MAX_TOKENS: int = 4000
    LLM_TIMEOUT_SECONDS: float = Field(default=60.0, gt=0)
    LOG_LEVEL: str = "INFO"


settings = Settings()


def setup_logging(level: Optional[str] = None) -> None:
    """Configure the root logger once for scripts and the CLI."""
    logging.basicConfig(
        level=(level or settings.LOG_LEVEL).upper(),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
