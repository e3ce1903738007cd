from pydantic_settings import BaseSettings
from .env_config import (
    get_ai_config,
    get_ingestion_config,
    get_env_list,
    env_config,
)
from .model_registry import resolve_model
import os
from pathlib import Path
from dotenv import load_dotenv

# Ensure backend/.env is loaded into process env before any os.getenv calls
_ENV_PATH = Path(__file__).resolve().parents[1] / ".env"
try:
    load_dotenv(_ENV_PATH, override=False)
except Exception:
    # fallback to default loader
    load_dotenv(override=False)


class Settings(BaseSettings):
    _ai_config = get_ai_config()
    _ingestion_config = get_ingestion_config()

    GEMINI_API_KEY: str = _ai_config["GEMINI_API_KEY"]
    GEMINI_MODEL: str = _ai_config["GEMINI_MODEL"]
    AI_CALL_TIMEOUT_SECONDS: float = float(_ai_config["AI_CALL_TIMEOUT_SECONDS"])
    AI_TEMPERATURE: float = float(_ai_config["AI_TEMPERATURE"])
    AI_MAX_OUTPUT_TOKENS: int = int(_ai_config["AI_MAX_OUTPUT_TOKENS"])

    INGESTION_CHUNK_SIZE: int = int(_ingestion_config["INGESTION_CHUNK_SIZE"])
    NOTIFICATIONS_MAX: int = int(_ingestion_config["NOTIFICATIONS_MAX"])

    HOST: str = os.getenv("HOST", "0.0.0.0")
    PORT: int = int(os.getenv("PORT", "8000"))

    class Config:
        env_file = ".env"
        case_sensitive = True
        extra = "allow"


settings = Settings()


class AIFlowConfigs:
    API_KEY = settings.GEMINI_API_KEY
    MODEL = resolve_model(settings.GEMINI_MODEL).id
    TIMEOUT_SECONDS = settings.AI_CALL_TIMEOUT_SECONDS
    TEMPERATURE = settings.AI_TEMPERATURE
    MAX_OUTPUT_TOKENS = min(settings.AI_MAX_OUTPUT_TOKENS, resolve_model(settings.GEMINI_MODEL).max_output_tokens)


class ComplianceConfigs:
    # id -> display label
    OPTIONS = {
        "FDA": "FDA",
        "GDPR": "GDPR",
        "ISO": "ISO 13485",
        "HIPAA": "HIPAA",
    }
    DEFAULT_SELECTION = ["FDA"]
    # Standards passed to test case generation regardless of the intake selection
    DEFAULT_GENERATION_STANDARDS = get_env_list("DEFAULT_GENERATION_STANDARDS", "FDA,GDPR")


class IngestionConfigs:
    CHUNK_SIZE = max(1, settings.INGESTION_CHUNK_SIZE)
    NOTIFICATIONS_MAX = settings.NOTIFICATIONS_MAX


class AgentLogConfigs:
    LOG_AGENT_RAW_OUTPUT = os.getenv("LOG_AGENT_RAW_OUTPUT", "false").lower() == "true"
    LOG_AGENT_RAW_OUTPUT_MAX_LENGTH = int(os.getenv("LOG_AGENT_RAW_OUTPUT_MAX_LENGTH", "2000"))


class HostingConfigs:
    HOST = settings.HOST
    PORT = settings.PORT
    URL = f"http://{HOST}:{PORT}"
    CORS_ORIGINS = get_env_list("CORS_ORIGINS", "*")
    ENVIRONMENT = env_config.environment
