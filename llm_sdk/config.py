import os
from dotenv import load_dotenv

load_dotenv()

DEFAULT_BASE_URL = "https://api.openai.com/v1"
DEFAULT_LOG_LEVEL = "INFO"


class Config:
    """Environment-driven settings, read from the process environment or a .env file."""

    API_KEY_ENV = "OPENAI_API_KEY"
    BASE_URL_ENV = "OPENAI_BASE_URL"
    LOG_LEVEL_ENV = "LLM_SDK_LOG_LEVEL"

    @staticmethod
    def get_api_key() -> str:
        return os.getenv(Config.API_KEY_ENV, "").strip()

    @staticmethod
    def get_base_url() -> str:
        return (os.getenv(Config.BASE_URL_ENV) or DEFAULT_BASE_URL).rstrip("/")

    @staticmethod
    def get_log_level() -> str:
        return os.getenv(Config.LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL).upper()
