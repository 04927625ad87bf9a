"""
Name: Application Configuration (Settings)

Responsibilities:
  - Centralized, typed configuration using pydantic-settings
  - Validate environment variables at startup
  - Provide defaults that match current behavior

Collaborators:
  - api/main.py: reads settings for CORS and dev seeding
  - container.py: reads settings for text processor configuration
  - interfaces/api/http/schemas: read settings for request validation limits
  - crosscutting/logger.py: reads log level / format

Constraints:
  - Lives in API/infrastructure layer, NOT in domain/application
  - No business logic, pure configuration

Notes:
  - Uses pydantic-settings for env parsing and validation
  - Singleton via lru_cache for performance
"""

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Attributes:
        app_env: Application environment (development/production)
        log_level: Root level for the service logger (default: INFO)
        log_json: Emit one JSON object per line (default: True)
        allowed_origins: Comma-separated CORS origins
        fragment_size: Lines per text fragment (default: 10)
        max_title_chars: Maximum title length (default: 200)
        max_text_chars: Maximum text length for uploads (default: 100_000)
        max_request_id_chars: Longest accepted X-Request-Id (default: 128)
        dev_seed_user: Create a local user at startup (default: False)
        dev_seed_user_id: Id of the seeded user
        dev_seed_user_email: Email of the seeded user
        dev_seed_user_username: Username of the seeded user
    """

    # Environment
    app_env: str = "development"

    # Logging
    log_level: str = "INFO"
    log_json: bool = True

    # CORS configuration
    allowed_origins: str = "http://localhost:3000"

    # Text processing
    fragment_size: int = 10

    # API limits
    max_title_chars: int = 200
    max_text_chars: int = 100_000
    max_request_id_chars: int = 128

    # Dev Tools
    dev_seed_user: bool = False
    dev_seed_user_id: str = "default-user"
    dev_seed_user_email: str = "user@typeten.local"
    dev_seed_user_username: str = "typist"

    @field_validator(
        "fragment_size", "max_title_chars", "max_text_chars", "max_request_id_chars"
    )
    @classmethod
    def limits_must_be_positive(cls, v: int) -> int:
        if v <= 0:
            raise ValueError("limits must be greater than 0")
        return v

    @field_validator("log_level")
    @classmethod
    def log_level_valid(cls, v: str) -> str:
        level = (v or "INFO").strip().upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"log_level must be one of {sorted(_LOG_LEVELS)}")
        return level

    def get_allowed_origins_list(self) -> list[str]:
        """Parse comma-separated origins into a list."""
        return [
            origin.strip()
            for origin in self.allowed_origins.split(",")
            if origin.strip()
        ]

    def is_production(self) -> bool:
        return self.app_env.strip().lower() == "production"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",  # Ignore unknown env vars
    )


@lru_cache
def get_settings() -> Settings:
    """
    Get singleton Settings instance.

    Raises:
        ValidationError: If env vars are invalid
    """
    return Settings()
