from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_name: str = "Smart Light Remote"

    # Brightness handling: False = reject out-of-range levels silently,
    # True = raise InvalidBrightnessLevel to the caller
    strict_brightness: bool = False

    # Logging
    log_level: str = "INFO"
    log_file: Optional[str] = Field(default="lightremote.log")
    log_max_bytes: int = 2_000_000
    log_backup_count: int = 5

    # HTTP panel
    host: str = "127.0.0.1"
    port: int = 8000


settings = Settings()
