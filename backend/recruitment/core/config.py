"""
Application configuration using Pydantic Settings
"""
from typing import List
from pydantic_settings import BaseSettings
from pydantic import Field


class Settings(BaseSettings):
    """Application settings loaded from environment variables"""

    # Application
    APP_NAME: str = "Recruitment System"
    APP_VERSION: str = "1.0.0"
    ENVIRONMENT: str = "development"
    DEBUG: bool = False
    SECRET_KEY: str = Field(default="change-this-in-production-min-32-characters-required", min_length=32)
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60 * 24

    # Database
    DATABASE_URL: str = "sqlite:///./recruitment.db"
    DATABASE_POOL_SIZE: int = 10
    DATABASE_MAX_OVERFLOW: int = 20
    DATABASE_ECHO: bool = False

    # File Upload
    UPLOAD_DIR: str = "./uploads"
    CV_MAX_SIZE_MB: int = 10
    CV_ALLOWED_EXTENSIONS: List[str] = ["pdf", "doc", "docx"]
    DOCUMENT_MAX_SIZE_MB: int = 5
    DOCUMENT_ALLOWED_EXTENSIONS: List[str] = ["pdf", "doc", "docx", "jpg", "jpeg", "png"]

    # Dashboards
    DASHBOARD_LIST_SIZE: int = 10
    DASHBOARD_OFFER_LIST_SIZE: int = 5

    # CORS
    CORS_ORIGINS: List[str] = ["http://localhost:5173", "http://localhost:3000"]
    CORS_ALLOW_CREDENTIALS: bool = True

    # Observability
    LOG_LEVEL: str = "INFO"
    LOG_JSON: bool = False

    class Config:
        env_file = ".env"
        case_sensitive = True


settings = Settings()
