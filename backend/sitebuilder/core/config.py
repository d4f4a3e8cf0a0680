from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_ignore_empty=True,
        extra="ignore",
    )

    PROJECT_NAME: str = "AI Website Builder"
    ENVIRONMENT: Literal["local", "staging", "production"] = "local"
    API_V1_STR: str = "/api"
    LOG_LEVEL: str = "INFO"

    DATABASE_URL: str = "sqlite:///./sitebuilder.db"

    BACKEND_CORS_ORIGINS: list[str] = ["http://localhost:5173"]

    # Any OpenAI-compatible endpoint; defaults target a local Ollama server.
    LLM_BASE_URL: str = "http://localhost:11434/v1"
    LLM_API_KEY: str = "ollama"
    MODEL_DEFAULT: str = "llama3.1:8b"
    LLM_TEMPERATURE: float = 0.7
    LLM_TIMEOUT_SECONDS: float = 120.0

    SUGGESTION_MAX_TOKENS: int = 1000
    SECTION_MAX_TOKENS: int = 1500
    CHAT_MAX_TOKENS: int = 500

    # Suggestions shorter than this are treated as a failed generation.
    SUGGESTION_MIN_CHARS: int = 300
    # Characters of each earlier section quoted back into prompts.
    SECTION_DIGEST_CHARS: int = 200


settings = Settings()  # type: ignore
