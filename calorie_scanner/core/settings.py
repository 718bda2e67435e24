"""
Purpose:
- Centralized configuration using pydantic-settings.
- Reads from environment variables and optional .env file.
- Keeps the Gemini endpoint, model and host/port tunable without code changes.
"""

# --- Purpose: robust settings with env-file support and safe handling of extra keys.
from typing import List, Optional
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    # Pydantic v2 config (env file + ignore unexpected env vars)
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # API host/port
    host: str = Field(default="127.0.0.1", description="Bind address for FastAPI/Uvicorn")
    port: int = Field(default=8000, description="Port for FastAPI/Uvicorn")

    # CORS
    cors_allow_origins: List[str] = Field(
        default=["http://localhost:3000", "http://127.0.0.1:8000"],
        description="Allowed origins for browser apps"
    )

    # ---- Gemini (generateContent REST) ----
    # Passed through as ?key=...; empty means auth is provided outside this service.
    gemini_api_key: str = Field(default="", description="Query-string key for generateContent")
    gemini_base_url: str = Field(default="https://generativelanguage.googleapis.com/v1beta")
    gemini_model: str = Field(default="gemini-2.5-flash-preview-05-20")
    # None keeps the transport default
    gemini_timeout_s: Optional[float] = Field(default=None)

    # Language the model is asked to answer in
    response_language: str = Field(default="Polish")

    # ---- Sessions / logging ----
    session_cookie_name: str = Field(default="scanner_session")
    session_max_count: int = Field(default=1000, description="Sessions kept in memory before LRU eviction")
    session_ttl_s: float = Field(default=3600.0, description="Idle seconds before a session is dropped")
    log_level: str = Field(default="INFO")

settings = Settings()
