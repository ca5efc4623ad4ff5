"""
Application configuration — reads all settings from environment variables.
"""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # ── App ──────────────────────────────────────────────
    APP_NAME: str = "Scripture AI"
    APP_VERSION: str = "1.0.0"
    DEBUG: bool = False
    HOST: str = "0.0.0.0"
    PORT: int = 8000
    CORS_ORIGINS: str = "*"
    LOG_LEVEL: str = "INFO"

    # ── Voice assistant ──────────────────────────────────
    ASSISTANT_NAME: str = "Roko"
    WAKE_WORD: str = "roko"
    SESSION_TTL_SECONDS: int = 1800
    MAX_SESSIONS: int = 1000
    MAX_TRANSCRIPT_TURNS: int = 50

    # ── Sentiment ────────────────────────────────────────
    INTENSIFIER_BOOST: float = 1.5
    POLARITY_THRESHOLD: float = 0.2

    # ── Local AI ─────────────────────────────────────────
    TOPIC_SEARCH_LIMIT: int = 3
    COMPARE_LIMIT: int = 2

    # ── Rate Limiting ────────────────────────────────────
    RATE_LIMIT_PER_MINUTE: int = 60

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"


settings = Settings()
