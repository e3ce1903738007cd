from fastapi import APIRouter
from .endpoints.dashboard import router as dashboard_router
from .endpoints.requirements_intake import router as requirements_router
from .endpoints.scenarios_management import router as scenarios_router
from .endpoints.notifications import router as notifications_router
from .endpoints.model_management import router as model_router


api_router = APIRouter()

api_router.include_router(dashboard_router, prefix="/dashboard", tags=["dashboard"])
api_router.include_router(requirements_router, prefix="/requirements", tags=["requirements"])
api_router.include_router(scenarios_router, prefix="/scenarios", tags=["scenarios"])
api_router.include_router(notifications_router, prefix="/notifications", tags=["notifications"])
api_router.include_router(model_router, tags=["models"])
