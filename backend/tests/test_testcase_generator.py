import pytest

from models.scenarios.scenario import Scenario
from services.testcases.testcase_generator import TestCaseGenerator, format_existing_test_cases
from conftest import make_test_cases


@pytest.mark.asyncio
async def test_generate_passes_description_default_standards_and_priority(flows):
    generator = TestCaseGenerator(flows, standards=["FDA", "GDPR"])
    scenario = Scenario(id="SCN-1", title="Login", description="User logs in with MFA", priority="High")

    result = await generator.generate(scenario)

    assert [tc.test_case_id for tc in result] == ["TC-001", "TC-002"]
    assert flows.calls["generateTestCases"] == [("User logs in with MFA", ["FDA", "GDPR"], "High")]


def test_default_standards_are_fda_and_gdpr(flows):
    assert TestCaseGenerator(flows).standards == ["FDA", "GDPR"]


def test_format_existing_test_cases():
    summary = format_existing_test_cases(make_test_cases("TC-001", "TC-002"))
    assert summary == "ID: TC-001, Title: Verify TC-001\nID: TC-002, Title: Verify TC-002"
