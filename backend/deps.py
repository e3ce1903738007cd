import logging
from fastapi import Request

from services.workflow.workbench_controller import WorkbenchController

logger = logging.getLogger(__name__)


def get_controller(request: Request) -> WorkbenchController:
    """
    Dependency returning the workbench controller created at startup.
    Both screens share the one instance held on app.state.
    """
    return request.app.state.controller
