from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    app_name: str = "docgen"
    debug: bool = False
    log_level: str = "INFO"

    # Server
    cors_origins: list[str] = ["*"]

    # Rendering
    default_format: str = "markdown"

    # Unparseable LLM output becomes a single "Content" section with this title
    fallback_title: str = "Untitled Document"
    fallback_summary_chars: int = 200

    # Rate limiting
    rate_limit_requests: int = 60
    rate_limit_window: int = 60

    # Request body limit (bytes)
    max_request_size: int = 10 * 1024 * 1024  # 10MB

    model_config = {"env_prefix": "DOCGEN_"}


settings = Settings()
