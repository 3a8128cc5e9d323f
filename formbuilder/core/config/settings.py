from pydantic_settings import BaseSettings
from functools import lru_cache
from typing import List

class Settings(BaseSettings):
    # Database settings
    DATABASE_URL: str = "sqlite:///./formbuilder.db"
    DATABASE_ECHO: bool = False

    # API settings
    PROJECT_NAME: str = "Form Builder API"
    DEBUG: bool = False
    CORS_ORIGINS: List[str] = ["http://localhost:5173"]

    # Logging settings
    LOG_DIR: str = "logs"
    LOG_LEVEL: str = "INFO"
    LOG_TO_FILE: bool = True

    # Seed data
    SEED_DEFAULT_DATA_TYPES: bool = True
    DEFAULT_DATA_TYPES: List[str] = ["text", "number", "date", "boolean", "email"]

    class Config:
        env_file = ".env"
        case_sensitive = True

@lru_cache()
def get_settings() -> Settings:
    """
    Get settings instance with caching
    Returns:
        Settings instance
    """
    return Settings()
