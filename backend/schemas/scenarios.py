from pydantic import BaseModel, ConfigDict, Field
from typing import List, Literal, Optional

from models.scenarios.scenario import Priority
from schemas.testcases import TestCase


class ScenarioSchema(BaseModel):
    id: str
    title: str
    description: str
    priority: Priority
    test_cases: List[TestCase] = Field(default_factory=list, alias="testCases")
    are_tests_generating: bool = Field(default=False, alias="areTestsGenerating")
    requirement_id: Optional[str] = Field(default=None, alias="requirementId")
    requirement_type: Optional[str] = Field(default=None, alias="requirementType")
    requirement_source: Optional[str] = Field(default=None, alias="requirementSource")

    model_config = ConfigDict(populate_by_name=True, from_attributes=True)


class ScenarioFormRequest(BaseModel):
    """Body of both the add and the edit form."""
    title: str = Field(..., min_length=1)
    description: str = Field(..., min_length=1)
    priority: Priority = "Medium"


class EditOutcomeSchema(BaseModel):
    status: Literal["applied", "pending_confirmation", "applied_without_analysis"]
    scenario: ScenarioSchema
    impact_analysis: Optional[str] = Field(default=None, alias="impactAnalysis")

    model_config = ConfigDict(populate_by_name=True)


class DashboardSummary(BaseModel):
    total_scenarios: int = Field(alias="totalScenarios")
    total_test_cases: int = Field(alias="totalTestCases")
    scenarios_by_priority: dict = Field(alias="scenariosByPriority")
    test_cases_by_priority: dict = Field(alias="testCasesByPriority")
    generating_scenarios: int = Field(alias="generatingScenarios")
    total_sources: int = Field(alias="totalSources")
    intake_ready: bool = Field(alias="intakeReady")
    analysis_pending: bool = Field(alias="analysisPending")
    handoff_available: bool = Field(alias="handoffAvailable")

    model_config = ConfigDict(populate_by_name=True)
