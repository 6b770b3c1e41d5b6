# app\shared\config.py
from pydantic_settings import BaseSettings, SettingsConfigDict
from enum import Enum
from typing import Optional

class AppEnv(str, Enum):
    DEVELOPMENT = "development"
    PRODUCTION = "production"
    TESTING = "testing"

class Settings(BaseSettings):
    """
    Central Configuration Registry.
    Strictly typed and validated via Pydantic.
    """

    # --- Application Meta ---
    APP_NAME: str = "Semantik Phrasing"
    APP_ENV: AppEnv = AppEnv.DEVELOPMENT

    @property
    def ENV(self) -> str:
        return self.APP_ENV.value

    DEBUG: bool = True

    # --- Logging ---
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "console"

    # --- Template Markers ---
    # Conventional markers: '@' for the acting Being, '~' for the affected one.
    USER_MARKER: str = "@"
    TARGET_MARKER: str = "~"

    # --- Contract Checking ---
    # None means "follow DEBUG": debug builds fail fast on a bad grammatical
    # person, release builds log a warning and fall back to third person.
    STRICT_CONTRACTS: Optional[bool] = None

    @property
    def contracts_enforced(self) -> bool:
        if self.STRICT_CONTRACTS is None:
            return self.DEBUG
        return self.STRICT_CONTRACTS

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

settings = Settings()
