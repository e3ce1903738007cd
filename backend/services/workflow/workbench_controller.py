"""
Top-level controller shared by the intake and scenario screens.

It owns one instance of each service and carries the analysis hand-off from
the intake screen to the scenario screen as a typed object.
"""

import logging
from collections import Counter
from typing import List, Optional

from core.config import ComplianceConfigs, IngestionConfigs
from core.exceptions import InputValidationError
from models.scenarios.scenario import PRIORITIES, Scenario
from schemas.requirements import AnalysisHandoff, AnalysisResult, ProjectDetails
from services.analysis.analysis_requestor import AnalysisRequestor
from services.ingestion.ingestion_collector import IngestionCollector
from services.llm.ai_flows import AIFlows, GeminiFlows
from services.notifications.notification_center import NotificationCenter
from services.scenarios.scenario_store import ScenarioStore
from services.testcases.testcase_generator import TestCaseGenerator

logger = logging.getLogger(__name__)


class WorkbenchController:
    def __init__(
        self,
        flows: Optional[AIFlows] = None,
        notifications: Optional[NotificationCenter] = None,
        chunk_size: Optional[int] = None,
        generation_standards: Optional[List[str]] = None,
    ):
        self.flows = flows or GeminiFlows()
        self.notifications = notifications or NotificationCenter(IngestionConfigs.NOTIFICATIONS_MAX)
        self.collector = IngestionCollector(self.notifications, chunk_size=chunk_size)
        self.requestor = AnalysisRequestor(self.flows, self.notifications)
        self.generator = TestCaseGenerator(self.flows, generation_standards)
        self.store = ScenarioStore(self.flows, self.generator, self.notifications)
        self.requirements_text = ""
        self._handoff: Optional[AnalysisHandoff] = None
        self._unsubscribe = self.collector.subscribe(self._on_requirements_changed)

    def _on_requirements_changed(self, text: str) -> None:
        self.requirements_text = text

    # ------------------------------------------------------------------
    # Intake
    # ------------------------------------------------------------------

    async def analyze(self, standards: List[str]) -> AnalysisResult:
        if self.collector.has_incomplete_sources:
            message = "Wait for all sources to finish reading, or cancel the incomplete ones."
            self.notifications.error("Upload In Progress", message)
            raise InputValidationError(message, field="sources")
        unknown = [s for s in standards if s not in ComplianceConfigs.OPTIONS]
        if unknown:
            message = f"Unknown compliance standard(s): {', '.join(unknown)}"
            self.notifications.error("Selection Required", message)
            raise InputValidationError(message, field="standards")

        text = self.requirements_text
        if self._handoff is not None:
            logger.info("workbench_controller: discarding previous analysis hand-off")
        self._handoff = None
        result = await self.requestor.analyze(text, standards)
        self._handoff = AnalysisHandoff(
            validation=result.validation,
            compliance=result.compliance,
            requirements=text,
        )
        logger.info("workbench_controller: analysis hand-off stored chars=%d", len(text))
        return result

    async def parse_project_details(self) -> ProjectDetails:
        text = self.requirements_text
        if not text.strip():
            self.notifications.error("Input Required", "Please provide requirements to parse.")
            raise InputValidationError("Requirements text is empty", field="requirements")
        return await self.flows.parse_project_details(text)

    def reset_intake(self) -> None:
        self.collector.reset()
        self.requestor.clear()
        self._handoff = None
        logger.info("workbench_controller: intake reset")

    # ------------------------------------------------------------------
    # Hand-off
    # ------------------------------------------------------------------

    def peek_handoff(self) -> Optional[AnalysisHandoff]:
        return self._handoff

    def consume_handoff(self) -> Optional[AnalysisHandoff]:
        handoff, self._handoff = self._handoff, None
        return handoff

    # ------------------------------------------------------------------
    # Dashboard
    # ------------------------------------------------------------------

    def dashboard_summary(self) -> dict:
        scenarios: List[Scenario] = self.store.list_scenarios()
        scenarios_by_priority = {p: 0 for p in PRIORITIES}
        scenarios_by_priority.update(Counter(s.priority for s in scenarios))
        test_cases_by_priority = {p: 0 for p in PRIORITIES}
        test_cases_by_priority.update(Counter(tc.priority for s in scenarios for tc in s.test_cases))
        return {
            "total_scenarios": len(scenarios),
            "total_test_cases": sum(len(s.test_cases) for s in scenarios),
            "scenarios_by_priority": scenarios_by_priority,
            "test_cases_by_priority": test_cases_by_priority,
            "generating_scenarios": sum(1 for s in scenarios if s.are_tests_generating),
            "total_sources": len(self.collector.sources),
            "intake_ready": self.collector.is_ready,
            "analysis_pending": self.requestor.is_pending,
            "handoff_available": self._handoff is not None,
        }
