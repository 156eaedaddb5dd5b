from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    PROJECT_NAME: str = "Shiftboard"
    API_PREFIX: str = "/api"

    # "memory" keeps everything in-process, "database" uses DATABASE_URL
    STORAGE_BACKEND: Literal["memory", "database"] = "memory"
    DATABASE_URL: str = "sqlite:///./shiftboard.db"

    BACKEND_CORS_ORIGINS: list[str] = []
    LOG_LEVEL: str = "INFO"
    SEED_DEFAULT_DATA: bool = True

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


settings = Settings()
