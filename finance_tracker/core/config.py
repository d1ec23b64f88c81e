from pathlib import Path
from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import List

class Settings(BaseSettings):
    # Environment
    ENVIRONMENT: str = "development"
    DEBUG: bool = True
    LOG_LEVEL: str = "INFO"

    # API Settings
    PROJECT_NAME: str = "Finance Tracker API"
    API_PREFIX: str = "/api"
    PROJECT_VERSION: str = "0.1.0"
    DESCRIPTION: str = "Expenses, income, budgets and party ledgers backed by JSON files"

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 8080

    # JSON storage
    DATA_DIR: str = "data"
    USERS_FILE: str = "users.json"
    DATABASE_FILE: str = "database.json"

    # CORS
    CORS_ORIGINS: List[str] = ["*"]

    # JWT
    SECRET_KEY: str = "change-this-in-production"
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60 * 24

    model_config = SettingsConfigDict(
        case_sensitive=True,
        env_file=".env"
    )

    @property
    def users_path(self) -> Path:
        return Path(self.DATA_DIR) / self.USERS_FILE

    @property
    def database_path(self) -> Path:
        return Path(self.DATA_DIR) / self.DATABASE_FILE

settings = Settings()
