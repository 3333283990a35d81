"""Application configuration (settings and environment).

Single source of truth for all configuration. Uses pydantic-settings
with .env support. Required fields (e.g. SECRET_KEY) are validated at
load time.
"""

from functools import lru_cache

from pydantic import SecretStr, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment and .env.

    All settings are optional with defaults except secret_key, validated in
    validate_required.
    """

    # App
    app_name: str = "zycle"
    app_version: str = "1.0.0"
    debug: bool = False

    # Security
    secret_key: SecretStr = SecretStr("")
    algorithm: str = "HS256"
    access_token_expire_minutes: int = 480  # 8 hours
    password_reset_token_expire_minutes: int = 30

    # CORS
    allowed_origins: str = "http://localhost:3000,http://localhost:9002"

    # Request / middleware
    request_id_header: str = "X-Request-ID"
    rate_limit_enabled: bool = True

    # Firebase / Firestore: use key (env) or path (file).
    firebase_service_account_key: SecretStr | None = None
    firebase_service_account_path: str | None = None  # Path to JSON file

    # Hosted generative model (Gemini REST API)
    gemini_api_key: SecretStr | None = None
    gemini_base_url: str = "https://generativelanguage.googleapis.com"
    gemini_model: str = "gemini-2.0-flash"
    gemini_timeout_seconds: float = 60.0

    # ZIA assistant
    zia_max_tool_rounds: int = 10
    zia_recent_records: int = 5

    # OpenTelemetry
    telemetry_enabled: bool = True
    telemetry_exporter: str = "console"
    telemetry_otlp_endpoint: str | None = None
    telemetry_sample_rate: float = 1.0
    telemetry_environment: str = "development"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    @model_validator(mode="after")
    def validate_required(self) -> "Settings":
        """Validate required env and numeric limits."""
        if not self.secret_key.get_secret_value():
            raise ValueError(
                "SECRET_KEY is required. Generate with: openssl rand -hex 32."
            )
        if self.zia_max_tool_rounds < 1:
            raise ValueError("ZIA_MAX_TOOL_ROUNDS must be at least 1")
        if self.zia_recent_records < 1:
            raise ValueError("ZIA_RECENT_RECORDS must be at least 1")
        return self


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings (single instance per process).

    Validation runs on first call, not at import time. In tests, call
    get_settings.cache_clear() before overriding env vars so the next
    get_settings() uses the new values.

    Returns:
        Loaded and validated Settings instance.
    """
    return Settings()
