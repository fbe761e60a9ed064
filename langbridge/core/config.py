from pydantic import BaseModel
from typing import List
import os


class Settings(BaseModel):
    APP_NAME: str = "LangBridge"
    VERSION: str = "1.0.0"
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    # MongoDB, transactions need a replica set
    MONGO_URL: str = os.getenv(
        "MONGO_URL", "mongodb://localhost:27017/?replicaSet=rs0"
    )
    MONGO_DATABASE: str = os.getenv("MONGO_DATABASE", "langbridge")

    REDIS_HOST: str = os.getenv("REDIS_HOST", "localhost")
    REDIS_PORT: int = int(os.getenv("REDIS_PORT", "6379"))
    REDIS_DB: int = int(os.getenv("REDIS_DB", "0"))
    REDIS_SOCKET_TIMEOUT: float = float(os.getenv("REDIS_SOCKET_TIMEOUT", "2"))
    NOTIFICATION_CHANNEL: str = os.getenv("NOTIFICATION_CHANNEL", "friendRequests")

    # Security
    SECRET_KEY: str = os.getenv("SECRET_KEY", "change-me-in-production")
    ALGORITHM: str = os.getenv("ALGORITHM", "HS256")
    ACCESS_TOKEN_EXPIRE_MINUTES: int = int(
        os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", "60")
    )

    # Theme preferences
    THEME_STORAGE_PREFIX: str = os.getenv("THEME_STORAGE_PREFIX", "ChatApp")
    DEFAULT_THEME: str = os.getenv("DEFAULT_THEME", "forest")

    CORS_ORIGINS: List[str] = [
        origin.strip()
        for origin in os.getenv("CORS_ORIGINS", "*").split(",")
        if origin.strip()
    ]


settings = Settings()
