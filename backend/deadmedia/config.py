"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - get_settings() is cached (lru_cache) — single instance per process
    - store delay bounds are milliseconds, min <= max

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - DEADMEDIA_ prefix: variables do not collide with other services on the host
    - Defaults provided for every setting: works out-of-the-box with no environment
"""

from functools import lru_cache

from pydantic import model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env", env_prefix="DEADMEDIA_", case_sensitive=False,
        extra="ignore",
    )

    # Server
    host: str = "0.0.0.0"
    port: int = 3000

    # Seed data loaded into the store on startup (JSON array)
    seed_file: str | None = None

    # Store
    store_min_delay_ms: int = 4
    store_max_delay_ms: int = 32
    store_error_mode: bool = False

    # Transfer
    peer_timeout_seconds: float = 10.0

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"

    @model_validator(mode="after")
    def check_delay_bounds(self):
        if self.store_min_delay_ms < 0 or self.store_min_delay_ms > self.store_max_delay_ms:
            raise ValueError("store delay bounds must satisfy 0 <= min <= max")
        return self


@lru_cache
def get_settings() -> Settings:
    return Settings()
