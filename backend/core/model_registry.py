"""
Registry of the Gemini models the AI flows can run on.

GEMINI_MODEL is checked against this registry at startup; an unknown id falls
back to the default so a typo in .env never breaks every AI call.
"""

import logging
from dataclasses import dataclass, asdict
from typing import Dict, List, Optional

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ModelInfo:
    id: str
    name: str
    description: str
    max_output_tokens: int = 8192
    json_mode: bool = True  # accepts response_mime_type="application/json"


MODELS: Dict[str, ModelInfo] = {
    m.id: m
    for m in (
        ModelInfo("gemini-2.5-flash", "Gemini 2.5 Flash",
                  "Default for validation, compliance and test case flows"),
        ModelInfo("gemini-2.5-flash-lite", "Gemini 2.5 Flash Lite",
                  "Cheaper, higher rate limits; weaker on long documents"),
        ModelInfo("gemini-2.5-pro", "Gemini 2.5 Pro",
                  "Most capable; slow for interactive impact analysis",
                  max_output_tokens=16384),
    )
}

DEFAULT_MODEL = "gemini-2.5-flash"


def get_model(model_id: str) -> Optional[ModelInfo]:
    return MODELS.get(model_id)


def list_models() -> List[Dict]:
    return [asdict(m) for m in MODELS.values()]


def resolve_model(model_id: Optional[str]) -> ModelInfo:
    """Return the registered model for model_id, or the default one."""
    if model_id and model_id in MODELS:
        return MODELS[model_id]
    if model_id:
        logger.warning("model_registry: unknown model '%s', falling back to %s", model_id, DEFAULT_MODEL)
    return MODELS[DEFAULT_MODEL]
