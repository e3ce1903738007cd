"""
Shared fixtures for the workbench tests.

`FakeFlows` stands in for the Gemini-backed AI flows: it records every call,
returns canned results, can be told to fail a flow, and can hold a flow open
on an asyncio.Event so tests can observe in-flight state.
"""

import asyncio
from collections import defaultdict
from typing import Dict, List, Optional, Set

import pytest

from core.exceptions import AIFlowError
from schemas.requirements import (
    CompletenessValidation,
    ComplianceCheckOutput,
    MissingElement,
    ProjectDetails,
    ValidateRequirementsOutput,
)
from schemas import testcases as tc_schema
from services.notifications.notification_center import NotificationCenter


def make_test_cases(*ids: str, priority: str = "High") -> List[tc_schema.TestCase]:
    return [
        tc_schema.TestCase(test_case_id=i, title=f"Verify {i}", priority=priority, steps=["open", "check"])
        for i in ids
    ]


class FakeFlows:
    def __init__(self):
        self.calls: Dict[str, List[tuple]] = defaultdict(list)
        self.fail: Set[str] = set()
        self.gates: Dict[str, asyncio.Event] = {}
        self.validation = ValidateRequirementsOutput(
            completeness_validation=CompletenessValidation(
                is_valid=False,
                missing_elements=[MissingElement(element="Performance", reason="No response time targets")],
            )
        )
        self.compliance = ComplianceCheckOutput(
            compliance_report="Audit trail requirements are partially covered.",
            suggestions="Add electronic signature requirements.",
        )
        self.test_cases = make_test_cases("TC-001", "TC-002")
        self.impact = "TC-001 is invalidated by the new login flow."
        self.project_details = ProjectDetails(
            app_name="MedTrack",
            objective="Track medication intake",
            features=["Login", "Dose reminders"],
            tech_stack=["FastAPI"],
        )

    async def _call(self, flow: str, *args):
        self.calls[flow].append(args)
        gate = self.gates.get(flow)
        if gate is not None:
            await gate.wait()
        if flow in self.fail:
            raise AIFlowError(flow, "collaborator unavailable")

    def count(self, flow: str) -> int:
        return len(self.calls[flow])

    async def validate_requirements(self, requirements):
        await self._call("validateRequirements", requirements)
        return self.validation

    async def compliance_check(self, requirements, compliance_standards):
        await self._call("complianceCheck", requirements, compliance_standards)
        return self.compliance

    async def generate_test_cases(self, scenario, compliance_standards, priority):
        await self._call("generateTestCases", scenario, compliance_standards, priority)
        return tc_schema.GenerateTestCasesOutput(test_cases=list(self.test_cases))

    async def analyze_impact_on_change(self, requirement_changes, existing_test_cases):
        await self._call("analyzeImpactOnChange", requirement_changes, existing_test_cases)
        return tc_schema.ImpactAnalysisOutput(impact_analysis=self.impact)

    async def parse_project_details(self, requirements):
        await self._call("parseProjectDetails", requirements)
        return self.project_details


class MemoryFile:
    """Minimal async file with the UploadFile surface the collector reads."""

    def __init__(self, filename: str, data: bytes, size: Optional[int] = None, fail_after: Optional[int] = None):
        self.filename = filename
        self.data = data
        self.size = len(data) if size is None else size
        self.fail_after = fail_after
        self.gate: Optional[asyncio.Event] = None
        self._pos = 0

    async def read(self, size: int = -1) -> bytes:
        if self.gate is not None and self._pos > 0:
            await self.gate.wait()
        if self.fail_after is not None and self._pos >= self.fail_after:
            raise OSError("connection reset")
        if size < 0:
            size = len(self.data) - self._pos
        chunk = self.data[self._pos:self._pos + size]
        self._pos += len(chunk)
        await asyncio.sleep(0)
        return chunk


@pytest.fixture
def flows():
    return FakeFlows()


@pytest.fixture
def notifications():
    return NotificationCenter(max_items=50)


def titles(notifications: NotificationCenter) -> List[str]:
    return [n.title for n in notifications.list()]


@pytest.fixture
def client(flows):
    """TestClient over the real app with the AI flows replaced by FakeFlows."""
    from fastapi.testclient import TestClient
    from main import app
    from services.workflow.workbench_controller import WorkbenchController

    app.state.controller = WorkbenchController(flows=flows)
    with TestClient(app) as test_client:
        yield test_client
    app.state.controller = None
