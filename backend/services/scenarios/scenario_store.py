"""
Scenario store: the ordered, user-managed list of scenarios and their test cases.

Edits to scenarios that already own test cases go through impact analysis and
are parked until the user confirms or cancels the report. Test case generation
runs per scenario; concurrent generations for different scenarios each write
only to their own entry, looked up by id when the result lands.
"""

import logging
import time
from dataclasses import dataclass
from typing import Dict, List, Literal, Optional

from core.exceptions import (
    GenerationInProgressError,
    PendingEditNotFoundError,
    ScenarioNotFoundError,
    TestCaseGenerationError,
)
from models.scenarios.scenario import PendingEdit, Priority, Scenario
from schemas.requirements import ProjectDetails
from schemas.testcases import TestCase
from services.llm.ai_flows import AIFlows
from services.notifications.notification_center import NotificationCenter
from services.testcases.testcase_generator import TestCaseGenerator, format_existing_test_cases

logger = logging.getLogger(__name__)

EditStatus = Literal["applied", "pending_confirmation", "applied_without_analysis"]


@dataclass
class EditOutcome:
    status: EditStatus
    scenario: Scenario
    impact_analysis: Optional[str] = None


def describe_changes(scenario: Scenario, title: str, description: str) -> str:
    return (
        f'Title changed from "{scenario.title}" to "{title}". '
        f'Description changed from "{scenario.description}" to "{description}".'
    )


class ScenarioStore:
    def __init__(
        self,
        flows: AIFlows,
        generator: Optional[TestCaseGenerator] = None,
        notifications: Optional[NotificationCenter] = None,
    ):
        self.flows = flows
        self.generator = generator or TestCaseGenerator(flows)
        self.notifications = notifications or NotificationCenter()
        self._scenarios: Dict[str, Scenario] = {}
        self._pending_edits: Dict[str, PendingEdit] = {}
        self._last_id_ms = 0

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def list_scenarios(self) -> List[Scenario]:
        return list(self._scenarios.values())

    def get_scenario(self, scenario_id: str) -> Scenario:
        scenario = self._scenarios.get(scenario_id)
        if scenario is None:
            raise ScenarioNotFoundError(scenario_id)
        return scenario

    def get_pending_edit(self, scenario_id: str) -> Optional[PendingEdit]:
        return self._pending_edits.get(scenario_id)

    # ------------------------------------------------------------------
    # Add / delete
    # ------------------------------------------------------------------

    def add_scenario(
        self,
        title: str,
        description: str,
        priority: Priority = "Medium",
        requirement_id: Optional[str] = None,
        requirement_type: Optional[str] = None,
        requirement_source: Optional[str] = None,
        notify: bool = True,
    ) -> Scenario:
        scenario = Scenario(
            id=self._next_id(),
            title=title,
            description=description,
            priority=priority,
            requirement_id=requirement_id,
            requirement_type=requirement_type,
            requirement_source=requirement_source,
        )
        self._scenarios[scenario.id] = scenario
        logger.info("scenario_store: added scenario id=%s priority=%s", scenario.id, priority)
        if notify:
            self.notifications.notify("Scenario Added", f'Scenario "{title}" has been created.')
        return scenario

    def add_scenarios_from_project_details(self, details: ProjectDetails) -> List[Scenario]:
        """Create one Medium-priority scenario per parsed feature, tagged with where it came from."""
        source = details.app_name or "Project details"
        created = []
        for index, feature in enumerate(f for f in details.features if f.strip()):
            parts = [f"Feature: {feature}"]
            if details.app_name:
                parts.append(f"Application: {details.app_name}")
            if details.objective:
                parts.append(f"Objective: {details.objective}")
            created.append(
                self.add_scenario(
                    title=feature,
                    description="\n".join(parts),
                    priority="Medium",
                    requirement_id=f"FEAT-{index + 1:03d}",
                    requirement_type="Feature",
                    requirement_source=source,
                    notify=False,
                )
            )
        logger.info("scenario_store: created %d scenario(s) from project details source=%s", len(created), source)
        if created:
            self.notifications.notify("Scenarios Added", f"{len(created)} scenario(s) created from {source}.")
        return created

    def delete_scenario(self, scenario_id: str) -> None:
        if scenario_id not in self._scenarios:
            raise ScenarioNotFoundError(scenario_id)
        del self._scenarios[scenario_id]
        self._pending_edits.pop(scenario_id, None)
        logger.info("scenario_store: deleted scenario id=%s", scenario_id)
        self.notifications.notify("Scenario Deleted")

    def clear(self) -> None:
        self._scenarios.clear()
        self._pending_edits.clear()

    # ------------------------------------------------------------------
    # Edit flow
    # ------------------------------------------------------------------

    async def edit_scenario(
        self, scenario_id: str, title: str, description: str, priority: Priority
    ) -> EditOutcome:
        scenario = self.get_scenario(scenario_id)

        if not scenario.test_cases:
            self._apply(scenario, title, description, priority)
            self.notifications.notify("Scenario Updated")
            return EditOutcome(status="applied", scenario=scenario)

        changes = describe_changes(scenario, title, description)
        existing = format_existing_test_cases(scenario.test_cases)
        logger.info(
            "scenario_store: requesting impact analysis id=%s test_cases=%d",
            scenario_id, len(scenario.test_cases),
        )
        try:
            result = await self.flows.analyze_impact_on_change(changes, existing)
        except Exception as e:
            logger.warning("scenario_store: impact analysis failed id=%s, applying edit: %s", scenario_id, e)
            self.notifications.error("Impact Analysis Failed")
            current = self._scenarios.get(scenario_id)
            if current is None:
                raise ScenarioNotFoundError(scenario_id) from e
            self._apply(current, title, description, priority)
            return EditOutcome(status="applied_without_analysis", scenario=current)

        if self._scenarios.get(scenario_id) is not scenario:
            raise ScenarioNotFoundError(scenario_id)

        self._pending_edits[scenario_id] = PendingEdit(
            scenario_id=scenario_id,
            title=title,
            description=description,
            priority=priority,
            impact_analysis=result.impact_analysis,
        )
        return EditOutcome(
            status="pending_confirmation",
            scenario=scenario,
            impact_analysis=result.impact_analysis,
        )

    def confirm_edit(self, scenario_id: str) -> Scenario:
        """Apply a parked edit. The scenario's test cases are invalidated by it and cleared."""
        scenario = self.get_scenario(scenario_id)
        pending = self._pending_edits.pop(scenario_id, None)
        if pending is None:
            raise PendingEditNotFoundError(scenario_id)
        self._apply(scenario, pending.title, pending.description, pending.priority)
        scenario.test_cases = []
        self.notifications.notify("Scenario Updated", "Test cases have been cleared due to changes.")
        return scenario

    def cancel_edit(self, scenario_id: str) -> Scenario:
        scenario = self.get_scenario(scenario_id)
        if self._pending_edits.pop(scenario_id, None) is None:
            raise PendingEditNotFoundError(scenario_id)
        logger.info("scenario_store: discarded pending edit id=%s", scenario_id)
        return scenario

    # ------------------------------------------------------------------
    # Test case generation
    # ------------------------------------------------------------------

    async def generate_test_cases(self, scenario_id: str) -> Scenario:
        scenario = self.get_scenario(scenario_id)
        if scenario.are_tests_generating:
            logger.info("scenario_store: generation already running id=%s", scenario_id)
            raise GenerationInProgressError(scenario_id)

        revision = scenario.revision
        scenario.are_tests_generating = True
        try:
            test_cases: List[TestCase] = await self.generator.generate(scenario)
        except Exception as e:
            current = self._scenarios.get(scenario_id)
            if current is not None:
                current.are_tests_generating = False
            logger.error("scenario_store: generation failed id=%s: %s", scenario_id, e)
            self.notifications.error("Test Case Generation Failed")
            raise TestCaseGenerationError(scenario_id, str(e)) from e

        current = self._scenarios.get(scenario_id)
        if current is None:
            logger.info("scenario_store: dropping generated test cases for deleted scenario id=%s", scenario_id)
            raise ScenarioNotFoundError(scenario_id)
        current.are_tests_generating = False
        if current.revision != revision:
            logger.info("scenario_store: dropping test cases generated before edit id=%s", scenario_id)
            self.notifications.notify(
                "Test Cases Discarded", "The scenario changed while test cases were being generated."
            )
            return current
        current.test_cases = test_cases
        self.notifications.notify(
            "Test Cases Generated", f'{len(test_cases)} test case(s) generated for "{current.title}".'
        )
        return current

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _apply(self, scenario: Scenario, title: str, description: str, priority: Priority) -> None:
        scenario.title = title
        scenario.description = description
        scenario.priority = priority
        scenario.revision += 1
        logger.info("scenario_store: applied edit id=%s", scenario.id)

    def _next_id(self) -> str:
        now_ms = int(time.time() * 1000)
        self._last_id_ms = max(now_ms, self._last_id_ms + 1)
        return f"SCN-{self._last_id_ms}"
