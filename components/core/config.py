from functools import lru_cache
from typing import Optional
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        validate_default=True,
    )

    # Database settings
    DB_URL: Optional[str] = None  # Optional full DB URL
    DB_USER: str = "fintrack"
    DB_PASSWORD: str = "fintrack"
    DB_HOST: str = "localhost"
    DB_PORT: int = 3306
    DB_NAME: str = "fintrack"
    DB_CREATE_TABLES: bool = False

    # API settings
    API_VERSION: str = "v1"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"
    PAGE_LIMIT_MAX: int = 100

    # JWT settings
    SECRET_KEY: str = "change-me"  # Override in every deployed environment
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 30

    @property
    def async_db_url(self) -> str:
        """Get asynchronous database URL."""
        if self.DB_URL:
            return self.DB_URL
        return f"mysql+aiomysql://{self.DB_USER}:{self.DB_PASSWORD}@{self.DB_HOST}:{self.DB_PORT}/{self.DB_NAME}"

    @property
    def api_prefix(self) -> str:
        return f"/api/{self.API_VERSION}"


@lru_cache()
def get_settings() -> Settings:
    """
    Returns cached Settings instance to avoid reloading .env file on every access
    """
    return Settings()


settings = get_settings()
