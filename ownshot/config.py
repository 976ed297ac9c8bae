# FILE: ownshot/config.py
"""
Configuration management for OwnShot enhance backend
Loads from environment variables with validation
"""
import logging
from typing import List, Optional
from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

APP_VERSION = "0.1.0"


class Settings(BaseSettings):
    """Application settings loaded from environment"""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True
    )

    # Backend server
    backend_host: str = Field(default="0.0.0.0", alias="BACKEND_HOST")
    backend_port: int = Field(default=8000, alias="BACKEND_PORT")
    environment: str = Field(default="development", alias="ENVIRONMENT")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    # Image generation boundary
    gemini_api_key: Optional[str] = Field(default=None, alias="GEMINI_API_KEY")
    gemini_image_model: str = Field(default="gemini-3-pro-image-preview", alias="GEMINI_IMAGE_MODEL")
    gemini_analysis_model: str = Field(default="gemini-3-pro-image-preview", alias="GEMINI_ANALYSIS_MODEL")
    gemini_timeout_seconds: int = Field(
        default=60,
        alias="GEMINI_TIMEOUT_SECONDS",
        description="HTTP timeout for a single image-generation round trip"
    )

    # Upload validation
    max_upload_mb: int = Field(default=8, alias="MAX_UPLOAD_MB")
    allowed_mime_types: List[str] = Field(
        default=["image/png", "image/jpeg", "image/webp"],
        alias="ALLOWED_MIME_TYPES"
    )

    # Security
    body_size_limit_mb: int = Field(
        default=10,
        alias="BODY_SIZE_LIMIT_MB",
        description="Whole request limit; leaves room for multipart overhead on top of MAX_UPLOAD_MB"
    )

    # CORS
    cors_origins: List[str] = Field(default=["http://localhost:3000"], alias="CORS_ORIGINS")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v):
        level = v.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"log_level must be a logging level name, got '{v}'")
        return level

    @field_validator("max_upload_mb")
    @classmethod
    def validate_max_upload_mb(cls, v):
        if v <= 0:
            raise ValueError("max_upload_mb must be positive")
        return v

    @field_validator("gemini_timeout_seconds")
    @classmethod
    def validate_timeout(cls, v):
        if v <= 0:
            raise ValueError("gemini_timeout_seconds must be positive")
        return v

    @model_validator(mode="after")
    def validate_body_limit(self):
        if self.body_size_limit_mb < self.max_upload_mb:
            raise ValueError("body_size_limit_mb must be at least max_upload_mb")
        return self

    @property
    def max_upload_bytes(self) -> int:
        return self.max_upload_mb * 1024 * 1024


_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get or create singleton settings instance"""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reload_settings():
    """Reload settings (useful for testing)"""
    global _settings
    _settings = None
    return get_settings()
