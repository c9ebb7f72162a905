import logging
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Loads all environment variables into a single, accessible object."""
    model_config = SettingsConfigDict(env_file='.env', env_file_encoding='utf-8', extra='ignore')

    GEMINI_API_KEY: str = ""
    GEMINI_MODEL: str = "gemini-3-flash-preview"
    GEMINI_BASE_URL: str = "https://generativelanguage.googleapis.com"

    VERIFACT_DATA_DIR: str = "./data"
    LOG_LEVEL: str = "INFO"

    @property
    def GEMINI_ENDPOINT(self) -> str:
        return f"{self.GEMINI_BASE_URL}/v1beta/models/{self.GEMINI_MODEL}:generateContent"


settings = Settings()

logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger("verifact")

from .constants import (
    LLM_CONFIG,
    HISTORY_CONFIG,
    CREDIBILITY_CONFIG,
    PARSER_CONFIG,
)


def check_api_keys_on_startup():
    """Check for the Gemini API key on startup."""
    if not settings.GEMINI_API_KEY:
        logger.warning("GEMINI_API_KEY is not configured. Analyses will fail until it is set.")
    else:
        logger.info("Gemini API key is configured (model=%s).", settings.GEMINI_MODEL)


__all__ = [
    "logger",
    "settings",
    "Settings",
    "check_api_keys_on_startup",
    "LLM_CONFIG",
    "HISTORY_CONFIG",
    "CREDIBILITY_CONFIG",
    "PARSER_CONFIG",
]
