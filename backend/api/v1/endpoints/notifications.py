from dataclasses import asdict
from typing import List

from fastapi import APIRouter, Depends

from deps import get_controller
from services.workflow.workbench_controller import WorkbenchController

router = APIRouter()


@router.get("")
async def list_notifications(controller: WorkbenchController = Depends(get_controller)) -> List[dict]:
    return [asdict(n) for n in controller.notifications.list()]


@router.delete("")
async def clear_notifications(controller: WorkbenchController = Depends(get_controller)):
    controller.notifications.clear()
    return {"status": "cleared"}
