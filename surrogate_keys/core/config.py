"""Application configuration (settings and environment).

Single source of truth for all configuration. Uses pydantic-settings
with .env support. The Surrogate-Key header limit and fingerprint width
are fixed by the CDN and live in core.constants, not here.
"""

from functools import lru_cache

from pydantic import model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

TELEMETRY_EXPORTERS = ("console", "otlp", "none")


class Settings(BaseSettings):
    """Application settings loaded from environment and .env.

    All settings are optional with defaults; combinations are checked in
    validate_settings.
    """

    # App
    app_name: str = "surrogate-keys"
    app_version: str = "1.0.0"
    debug: bool = False

    # Surrogate-Key projection (header names and limits are constants)
    surrogate_key_enabled: bool = True

    # OpenTelemetry
    telemetry_enabled: bool = False
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
    def validate_settings(self) -> "Settings":
        """Validate telemetry options and production safety.

        - telemetry_exporter must be console, otlp or none; otlp needs an endpoint.
        - telemetry_sample_rate must be within [0, 1].
        - debug must be off when telemetry_environment is production.
        """
        if self.telemetry_exporter not in TELEMETRY_EXPORTERS:
            raise ValueError(
                f"telemetry_exporter must be one of {', '.join(TELEMETRY_EXPORTERS)}, "
                f"got: {self.telemetry_exporter!r}"
            )
        if self.telemetry_exporter == "otlp" and not self.telemetry_otlp_endpoint:
            raise ValueError(
                "TELEMETRY_OTLP_ENDPOINT is required when telemetry_exporter is 'otlp'."
            )
        if not 0.0 <= self.telemetry_sample_rate <= 1.0:
            raise ValueError(
                f"telemetry_sample_rate must be between 0 and 1, got: {self.telemetry_sample_rate}"
            )
        if self.debug and self.telemetry_environment == "production":
            raise ValueError(
                "debug must be False when telemetry_environment is 'production'."
            )
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
