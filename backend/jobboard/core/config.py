"""
Application Configuration

Centralized configuration management using Pydantic settings.
Handles environment variables, secrets, and application settings.
"""

from typing import List, Optional
from functools import lru_cache

from pydantic_settings import BaseSettings
from pydantic import Field


class Settings(BaseSettings):
    """Application settings with environment variable support."""

    # Application
    APP_NAME: str = "Job Board API"
    VERSION: str = "1.0.0"
    DEBUG: bool = Field(False, env="DEBUG")
    ENVIRONMENT: str = Field("development", env="ENVIRONMENT")
    HOST: str = Field("0.0.0.0", env="HOST")
    PORT: int = Field(8000, env="PORT")
    LOG_LEVEL: str = Field("INFO", env="LOG_LEVEL")
    TESTING: bool = Field(False, env="TESTING")

    # Security
    SECRET_KEY: str = Field(..., env="SECRET_KEY")
    ACCESS_TOKEN_EXPIRE_MINUTES: int = Field(60 * 24, env="ACCESS_TOKEN_EXPIRE_MINUTES")
    ALGORITHM: str = "HS256"
    SESSION_COOKIE_NAME: str = Field("jobboard.session_token", env="SESSION_COOKIE_NAME")

    # Database
    DATABASE_URL: str = Field(..., env="DATABASE_URL")
    DATABASE_POOL_SIZE: int = Field(5, env="DATABASE_POOL_SIZE")
    DATABASE_MAX_OVERFLOW: int = Field(10, env="DATABASE_MAX_OVERFLOW")

    # Search (Typesense)
    TYPESENSE_HOST: str = Field("localhost", env="TYPESENSE_HOST")
    TYPESENSE_PORT: int = Field(8108, env="TYPESENSE_PORT")
    TYPESENSE_PROTOCOL: str = Field("http", env="TYPESENSE_PROTOCOL")
    TYPESENSE_API_KEY: str = Field("xyz", env="TYPESENSE_API_KEY")
    TYPESENSE_CONNECTION_TIMEOUT_SECONDS: int = Field(2, env="TYPESENSE_CONNECTION_TIMEOUT_SECONDS")
    TYPESENSE_JOBS_COLLECTION: str = Field("jobs", env="TYPESENSE_JOBS_COLLECTION")

    # Storage (Firebase)
    FIREBASE_CREDENTIALS_PATH: Optional[str] = Field(None, env="FIREBASE_CREDENTIALS_PATH")
    FIREBASE_STORAGE_BUCKET: Optional[str] = Field(None, env="FIREBASE_STORAGE_BUCKET")
    MAX_UPLOAD_SIZE_MB: int = Field(10, env="MAX_UPLOAD_SIZE_MB")

    # Business rules
    SAVED_JOBS_LIMIT: int = Field(50, env="SAVED_JOBS_LIMIT")

    # CORS - simplified to avoid parsing issues
    CORS_ORIGINS: str = Field("http://localhost:3000,http://127.0.0.1:3000", env="CORS_ORIGINS")
    CORS_CREDENTIALS: bool = Field(True, env="CORS_CREDENTIALS")
    CORS_METHODS: str = Field("GET,POST,PUT,PATCH,DELETE", env="CORS_METHODS")
    CORS_HEADERS: str = Field("*", env="CORS_HEADERS")

    @property
    def is_sqlite(self) -> bool:
        """Whether the configured database is SQLite."""
        return self.DATABASE_URL.startswith("sqlite")

    def get_cors_origins_list(self) -> List[str]:
        """Get CORS origins as a list."""
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",")]

    def get_cors_methods_list(self) -> List[str]:
        """Get CORS methods as a list."""
        if self.CORS_METHODS == "*":
            return ["*"]
        return [method.strip() for method in self.CORS_METHODS.split(",")]

    def get_cors_headers_list(self) -> List[str]:
        """Get CORS headers as a list."""
        if self.CORS_HEADERS == "*":
            return ["*"]
        return [header.strip() for header in self.CORS_HEADERS.split(",")]

    class Config:
        """Pydantic configuration."""
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = True
        extra = "ignore"


@lru_cache()
def get_settings() -> Settings:
    """Get cached application settings."""
    return Settings()
