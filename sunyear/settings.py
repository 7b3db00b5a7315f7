from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Centralized configuration.

    Loaded from:
    - environment variables
    - .env file (if present)
    """
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_name: str = "Sunyear"

    # SQLite file written by the gazetteer importer; read-only here
    sqlite_path: str = "gazetteer.sqlite3"

    # Cities from this country rank first in search results
    preferred_country_code: str = "FI"
    search_default_limit: int = 5

    log_level: str = "INFO"


settings = Settings()
