"""
Application configuration.

Loads settings from environment variables and .env file.
Every tunable of the ledger service and its API lives here.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment.

    Attributes:
        project_name: Display name for the API.
        version: Current API version string.
        debug: Enable debug mode. Must be False in production.
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR).
        simulated_latency_ms: Delay added to every ledger store call.
        seed_demo_catalog: Load the demo properties at startup.
        rate_limit_enabled: Toggle rate limiting (off in tests).
        rate_limit_default: Default rate limit for read endpoints.
        rate_limit_mutations: Rate limit for purchases and deposits.
        notification_webhook_urls: URLs receiving every ledger event.
        webhook_timeout_seconds: HTTP timeout for webhook calls.
    """

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    project_name: str = "Proprials"
    version: str = "0.1.0"
    debug: bool = False
    log_level: str = "INFO"

    simulated_latency_ms: int = Field(default=0, ge=0)
    seed_demo_catalog: bool = True

    rate_limit_enabled: bool = True
    rate_limit_default: str = "120/minute"
    rate_limit_mutations: str = "20/minute"

    notification_webhook_urls: list[str] = Field(default_factory=list)
    webhook_timeout_seconds: float = 5.0

    @property
    def simulated_latency_seconds(self) -> float:
        return self.simulated_latency_ms / 1000


settings = Settings()
