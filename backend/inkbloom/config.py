from typing import List, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # API Keys
    OPENAI_API_KEY: str

    # Base URLs and endpoints
    OPENAI_BASE_URL: str = "https://api.openai.com/v1"

    # Model settings
    OPENAI_CHAT_MODEL: str = "gpt-3.5-turbo"
    OPENAI_IMAGE_MODEL: str = "dall-e-2"
    IMAGE_COUNT: int = 4
    IMAGE_SIZE: str = "1024x1024"

    # None disables the timeout on outbound calls
    REQUEST_TIMEOUT_SECONDS: Optional[float] = None

    # Server
    CORS_ORIGINS: List[str] = ["*"]
    LOG_LEVEL: str = "INFO"
    HOST: str = "0.0.0.0"
    PORT: int = 4000

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", case_sensitive=True, extra="ignore"
    )


# Create global settings instance
settings = Settings()
