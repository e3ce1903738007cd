import os
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()


class EnvConfig:
    """
    Minimal environment configuration helpers. Provides typed getters for the
    AI, ingestion and hosting settings.
    """

    def __init__(self) -> None:
        # Environment name (default/local/dev/qa/prod)
        self.environment = os.getenv("ENVIRONMENT", "default")


env_config = EnvConfig()


def get_env_variable(key: str, default: str | None = None) -> str:
    return os.getenv(key, default or "")


def get_env_list(key: str, default: str = "") -> list[str]:
    raw = os.getenv(key, default)
    return [item.strip() for item in raw.split(",") if item.strip()]


def get_ai_config() -> dict:
    return {
        "GEMINI_API_KEY": os.getenv("GEMINI_API_KEY", ""),
        "GEMINI_MODEL": os.getenv("GEMINI_MODEL", "gemini-2.5-flash"),
        "AI_CALL_TIMEOUT_SECONDS": os.getenv("AI_CALL_TIMEOUT_SECONDS", "120"),
        "AI_TEMPERATURE": os.getenv("AI_TEMPERATURE", "0.2"),
        "AI_MAX_OUTPUT_TOKENS": os.getenv("AI_MAX_OUTPUT_TOKENS", "8192"),
    }


def get_ingestion_config() -> dict:
    return {
        "INGESTION_CHUNK_SIZE": os.getenv("INGESTION_CHUNK_SIZE", "65536"),
        "NOTIFICATIONS_MAX": os.getenv("NOTIFICATIONS_MAX", "100"),
    }
