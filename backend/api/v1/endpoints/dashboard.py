from fastapi import APIRouter, Depends

from deps import get_controller
from schemas.scenarios import DashboardSummary
from services.workflow.workbench_controller import WorkbenchController

router = APIRouter()


@router.get("/summary", response_model=DashboardSummary, response_model_by_alias=True)
async def get_summary(controller: WorkbenchController = Depends(get_controller)):
    """Counts shown on the landing page: scenarios, test cases and intake state."""
    return DashboardSummary(**controller.dashboard_summary())
