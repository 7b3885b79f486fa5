"""Application configuration via pydantic-settings.

Loads all settings from environment variables (or a ``.env`` file) with
sensible defaults.  A global `settings` singleton is available for import
throughout the app.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # MySQL store
    CDB_HOST: str = "localhost"
    CDB_PORT: int = 3306
    CDB_USER: str = "root"
    CDB_PASSWORD: str = ""
    CDB_NAME: str = "candidate_db"
    CDB_CONNECTION_LIMIT: int = 10
    CDB_POOL_TIMEOUT: int = 30
    CDB_CREATE_SCHEMA: bool = False

    # Full SQLAlchemy URL, takes precedence over the CDB_* parts when set
    DATABASE_URL: str = ""

    # CORS
    ALLOWED_ORIGINS: str = "*"

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 5000

    # Logging
    LOG_LEVEL: str = "INFO"


settings = Settings()
