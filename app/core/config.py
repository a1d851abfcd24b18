# app/core/config.py
from functools import lru_cache

from pydantic import AnyHttpUrl, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Global application configuration.

    Values are loaded from environment variables (or a local `.env` file)
    at runtime and cover:
    - the source board URL and how it is fetched
    - the refresh interval
    - logging toggles
    - the internal API key
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    APP_NAME: str = "are-they-in-api"
    APP_ENV: str = Field("local", description="Environment name: local/dev/stage/prod")

    SOURCE_URL: AnyHttpUrl = Field(
        "https://aretheyin.boldmethod.com/index.aspx?op=public&sid=d2f78e63-1fb3-40ae-957f-920d2a455d85",
        description="Public in/out board page that is polled and republished.",
    )
    USER_AGENT: str = Field(
        "AreTheyInAPI/1.0",
        description="User-Agent header sent with every board fetch.",
    )
    FETCH_TIMEOUT_SECONDS: float = Field(
        20.0,
        description="Upper bound on a single outbound board fetch.",
    )

    POLL_SECONDS: float = Field(
        60.0,
        description="Interval between scheduled refresh cycles.",
    )
    POLLING_ENABLED: bool = Field(
        True,
        description="Start the periodic refresh loop with the application.",
    )

    LOG_LEVEL: str = Field("INFO", description="Root log level.")
    LOG_SAMPLE: bool = Field(
        False,
        description="Log the raw Updated cell of the first few rows on every refresh.",
    )

    INTERNAL_API_KEY: str | None = Field(
        default=None,
        description="API key required for hitting /internal endpoints",
    )

    HOST: str = Field("0.0.0.0", description="Bind address when run directly.")
    PORT: int = Field(3000, description="Listening port when run directly.")


@lru_cache()
def get_settings() -> Settings:
    """
    Cached accessor for application settings.

    Using LRU cache ensures settings are read and validated only once,
    while still being easily importable across the app.
    """
    return Settings()
