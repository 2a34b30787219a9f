# src/focusnav/core/config.py
import logging
from pathlib import Path
from dotenv import load_dotenv
load_dotenv(".env")
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field, field_validator
from typing import Optional, Dict

class Settings(BaseSettings):
    # Environment variables are read with the FOCUSNAV_ prefix, e.g. FOCUSNAV_LOG_LEVEL
    model_config = SettingsConfigDict(env_prefix='FOCUSNAV_', env_file='.env', env_file_encoding='utf-8', extra='ignore')

    APP_ENV: str = "production"

    # --- Logging ---
    LOG_LEVEL: str = Field("WARNING", description="Level for the focusnav package logger.")
    LOG_FILE: Optional[Path] = Field(None, description="Optional file that also receives focusnav logs.")

    # --- Key codes ---
    # JSON object, e.g. FOCUSNAV_KEY_CODES_EXTRA='{"10009": "LEFT"}'
    KEY_CODES_EXTRA: Dict[int, str] = Field(default_factory=dict, description="Key codes merged over the default table.")
    KEY_CODES_REPLACE_DEFAULTS: bool = Field(False, description="Use KEY_CODES_EXTRA instead of the defaults, not on top of them.")

    @field_validator("LOG_LEVEL")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level '{value}'.")
        return level

    @field_validator("KEY_CODES_EXTRA")
    @classmethod
    def _normalize_directions(cls, value: Dict[int, str]) -> Dict[int, str]:
        return {code: direction.strip().upper() for code, direction in value.items()}

settings = Settings()
