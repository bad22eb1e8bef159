from typing import List, Literal, Optional

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    app_name: str = "Instant Quote Request"
    N8N_WEBHOOK_URL: Optional[str] = None
    WEBHOOK_TIMEOUT_SECONDS: float = 30.0
    RELAY_BASE_URL: Optional[str] = None
    BRAND_NAME: str = "Signature Cleans"
    BRAND_PHONE: str = "01392 931035"
    BRAND_EMAIL: str = "nick@signature-cleans.co.uk"
    LOG_DIR: str = "logs"
    LOG_LEVEL: Literal["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"] = "INFO"
    CORS_ORIGINS: List[str] = ["*"]

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    @field_validator("LOG_LEVEL", mode="before")
    @classmethod
    def upper_log_level(cls, value):
        return value.strip().upper() if isinstance(value, str) else value

settings = Settings()
