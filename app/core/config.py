# app/core/config.py

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    # MongoDB settings
    MONGODB_URI: str = Field(default="mongodb://localhost:27017")
    MONGODB_DB: str = Field(default="mentorship")

    # Auth/JWT settings
    SECRET_KEY: str = Field(...)
    JWT_ALGORITHM: str = Field(default="HS256")
    ACCESS_TOKEN_EXPIRE_MINUTES: int = Field(default=60 * 24)

    # Live messaging (SSE) settings
    SSE_HEARTBEAT_SECONDS: float = Field(default=30.0, gt=0)
    SSE_QUEUE_SIZE: int = Field(default=100, gt=0)

    # Conversation paging
    MESSAGE_PAGE_SIZE: int = Field(default=50, gt=0)
    MESSAGE_MAX_PAGE_SIZE: int = Field(default=100, gt=0)

settings = Settings()
