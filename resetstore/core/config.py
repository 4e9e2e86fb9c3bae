# resetstore/core/config.py

from urllib.parse import quote

from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import computed_field


class Settings(BaseSettings):
    # -------------------------------------------------
    # Project
    # -------------------------------------------------
    APP_NAME: str = "resetstore"
    ENVIRONMENT: str = "local"

    # -------------------------------------------------
    # Database Settings
    # -------------------------------------------------
    DATABASE_HOST: str = "localhost"
    DATABASE_PORT: int = 5432
    DATABASE_USER: str = "postgres"
    DATABASE_PASSWORD: str = "postgres"
    DATABASE_NAME: str = "resetstore"
    DATABASE_CONNECT_TIMEOUT: float = 10.0  # seconds

    # -------------------------------------------------
    # Logging
    # -------------------------------------------------
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

    # -------------------------------------------------
    # Pydantic Settings
    # -------------------------------------------------
    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore",        # ignore unknown env vars
        case_sensitive=False,
    )

    @computed_field
    @property
    def DATABASE_URL(self) -> str:  # type: ignore[override]
        """
        Convenience DSN string for libraries that want a URL.
        Credentials are percent-encoded so reserved characters survive.
        """
        return (
            f"postgresql://{quote(self.DATABASE_USER, safe='')}:{quote(self.DATABASE_PASSWORD, safe='')}"
            f"@{self.DATABASE_HOST}:{self.DATABASE_PORT}/{self.DATABASE_NAME}"
        )


settings = Settings()
