"""Package configuration.

Defines `Settings` read from environment variables and an optional `.env` file.
"""
# feedback_questions/core/config.py
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    APP_NAME: str = "Feedback Questions"
    DEBUG: bool = False
    LOG_PATH: str = "logging"
    LOG_FILENAME: str = "questions.log"

    # values a bound takes when its checkbox is ticked in the MSQ details form
    MSQ_DEFAULT_MAX_SELECTABLE: int = 2
    MSQ_DEFAULT_MIN_SELECTABLE: int = 1


settings = Settings()
