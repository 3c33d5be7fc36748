from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Database
    DATABASE_URL: str = "sqlite:///./socialnet.db"

    # JWT Authentication (tokens are issued by the auth service)
    SECRET_KEY: str = "change-me"
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 30

    # Application
    APP_ENV: str = "development"
    DEBUG: bool = True
    LOG_LEVEL: str = "INFO"
    CORS_ORIGINS: List[str] = [
        "http://localhost:5173",
        "http://127.0.0.1:5173",
    ]

    # Messaging
    MESSAGE_EDIT_WINDOW_MINUTES: int = 10
    MAX_ATTACHMENT_BYTES: int = 15 * 1024 * 1024
    UPLOADS_DIR: str = "uploads"

    # Notifications
    NOTIFICATION_DEDUP_WINDOW_SECONDS: int = 60

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
    )


settings = Settings()
