"""
Model Management API Endpoints

Lists the Gemini models the AI flows can be configured with.
"""

from fastapi import APIRouter

from core.config import AIFlowConfigs
from core.model_registry import list_models as registry_models

router = APIRouter()


@router.get("/models")
async def list_models():
    """
    Get list of all available models.

    Returns:
        List of model objects with id, name and description, plus the model in use
    """
    return {"models": registry_models(), "active": AIFlowConfigs.MODEL}
