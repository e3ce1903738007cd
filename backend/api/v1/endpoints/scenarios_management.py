import logging
from typing import List, Optional

from fastapi import APIRouter, Body, Depends

from deps import get_controller
from schemas.requirements import AnalysisHandoff, ProjectDetails
from schemas.scenarios import EditOutcomeSchema, ScenarioFormRequest, ScenarioSchema
from services.workflow.workbench_controller import WorkbenchController


router = APIRouter()

logger = logging.getLogger(__name__)


@router.get("", response_model=List[ScenarioSchema], response_model_by_alias=True)
async def list_scenarios(controller: WorkbenchController = Depends(get_controller)):
    return [ScenarioSchema.model_validate(s) for s in controller.store.list_scenarios()]


@router.post("", response_model=ScenarioSchema, response_model_by_alias=True, status_code=201)
async def add_scenario(body: ScenarioFormRequest, controller: WorkbenchController = Depends(get_controller)):
    scenario = controller.store.add_scenario(body.title, body.description, body.priority)
    return ScenarioSchema.model_validate(scenario)


@router.get("/analysis", response_model=Optional[AnalysisHandoff], response_model_by_alias=True)
async def peek_analysis(controller: WorkbenchController = Depends(get_controller)):
    """Analysis handed over from the intake screen, or null when there is none."""
    return controller.peek_handoff()


@router.post("/analysis/consume", response_model=Optional[AnalysisHandoff], response_model_by_alias=True)
async def consume_analysis(controller: WorkbenchController = Depends(get_controller)):
    """Return the pending analysis and drop it; a second call returns null."""
    return controller.consume_handoff()


@router.post(
    "/from-project-details",
    response_model=List[ScenarioSchema],
    response_model_by_alias=True,
    status_code=201,
)
async def add_scenarios_from_project_details(
    details: Optional[ProjectDetails] = Body(default=None),
    controller: WorkbenchController = Depends(get_controller),
):
    """
    Create one scenario per feature.

    When no body is sent the project details are parsed from the current
    requirements text first.
    """
    if details is None:
        details = await controller.parse_project_details()
    logger.info("scenarios_management: creating scenarios for %d feature(s)", len(details.features))
    created = controller.store.add_scenarios_from_project_details(details)
    return [ScenarioSchema.model_validate(s) for s in created]


@router.get("/{scenario_id}", response_model=ScenarioSchema, response_model_by_alias=True)
async def get_scenario(scenario_id: str, controller: WorkbenchController = Depends(get_controller)):
    return ScenarioSchema.model_validate(controller.store.get_scenario(scenario_id))


@router.put("/{scenario_id}", response_model=EditOutcomeSchema, response_model_by_alias=True)
async def edit_scenario(
    scenario_id: str,
    body: ScenarioFormRequest,
    controller: WorkbenchController = Depends(get_controller),
):
    """
    Edit a scenario.

    Scenarios without test cases are updated at once (`applied`). Otherwise the
    impact report is returned and the edit waits for confirm/cancel
    (`pending_confirmation`); if the report cannot be produced the edit is
    applied and the test cases are kept (`applied_without_analysis`).
    """
    outcome = await controller.store.edit_scenario(scenario_id, body.title, body.description, body.priority)
    return EditOutcomeSchema(
        status=outcome.status,
        scenario=ScenarioSchema.model_validate(outcome.scenario),
        impact_analysis=outcome.impact_analysis,
    )


@router.post("/{scenario_id}/edit/confirm", response_model=ScenarioSchema, response_model_by_alias=True)
async def confirm_edit(scenario_id: str, controller: WorkbenchController = Depends(get_controller)):
    return ScenarioSchema.model_validate(controller.store.confirm_edit(scenario_id))


@router.post("/{scenario_id}/edit/cancel", response_model=ScenarioSchema, response_model_by_alias=True)
async def cancel_edit(scenario_id: str, controller: WorkbenchController = Depends(get_controller)):
    return ScenarioSchema.model_validate(controller.store.cancel_edit(scenario_id))


@router.delete("/{scenario_id}")
async def delete_scenario(scenario_id: str, controller: WorkbenchController = Depends(get_controller)):
    controller.store.delete_scenario(scenario_id)
    return {"status": "deleted", "id": scenario_id}


@router.post("/{scenario_id}/generate", response_model=ScenarioSchema, response_model_by_alias=True)
async def generate_test_cases(scenario_id: str, controller: WorkbenchController = Depends(get_controller)):
    scenario = await controller.store.generate_test_cases(scenario_id)
    return ScenarioSchema.model_validate(scenario)
