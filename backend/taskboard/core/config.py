from typing import List
from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    APP_NAME: str = "Taskboard API"
    API_PREFIX: str = "/api"

    # DB
    DATABASE_URL: str = "sqlite:///./data/taskboard.db"
    DATABASE_ECHO: bool = False

    # Server
    HOST: str = "127.0.0.1"
    PORT: int = 8000
    LOG_LEVEL: str = "INFO"
    CORS_ORIGINS: List[str] = ["*"]

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

settings = Settings()
