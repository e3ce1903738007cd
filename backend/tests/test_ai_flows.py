"""
GeminiFlows with the Gemini call replaced by a fake invoker.
"""

import json

import pytest

from core.exceptions import AIFlowError
from services.llm.ai_flows import GeminiFlows, load_prompt
from services.llm.gemini_invoker import InvokerError


class FakeInvoker:
    def __init__(self, response=None, error=None):
        self.response = response
        self.error = error
        self.prompts = []

    async def __call__(self, prompt, model_name=None, timeout_seconds=None, **kwargs):
        self.prompts.append(prompt)
        if self.error:
            raise self.error
        return self.response


def test_prompts_load_from_modules():
    for name in ("requirements_validation", "compliance_check", "testcase_generator",
                 "impact_analysis", "project_details"):
        assert load_prompt(name).strip()


def test_prompt_file_override(tmp_path, monkeypatch):
    prompt_file = tmp_path / "custom.txt"
    prompt_file.write_text("Custom validation prompt", encoding="utf-8")
    monkeypatch.setenv("REQUIREMENTS_VALIDATION_PROMPT_FILE", str(prompt_file))

    assert load_prompt("requirements_validation") == "Custom validation prompt"


@pytest.mark.asyncio
async def test_compliance_check_sends_standards_and_requirements():
    invoker = FakeInvoker(json.dumps({"complianceReport": "ok", "suggestions": "none"}))
    flows = GeminiFlows(invoker=invoker)

    result = await flows.compliance_check("Store audit logs", "FDA, GDPR")

    assert result.compliance_report == "ok"
    assert "FDA, GDPR" in invoker.prompts[0]
    assert "Store audit logs" in invoker.prompts[0]


@pytest.mark.asyncio
async def test_generate_test_cases_accepts_bare_list():
    invoker = FakeInvoker('[{"testCaseId": "TC-001", "title": "t", "priority": "Low"}]')
    flows = GeminiFlows(invoker=invoker)

    result = await flows.generate_test_cases("desc", ["FDA", "GDPR"], "Low")

    assert [tc.test_case_id for tc in result.test_cases] == ["TC-001"]
    assert '["FDA", "GDPR"]' in invoker.prompts[0]


@pytest.mark.asyncio
async def test_parse_project_details():
    invoker = FakeInvoker(json.dumps({
        "appName": "MedTrack", "objective": "o", "features": ["Login"], "techStack": ["Python"],
    }))

    details = await GeminiFlows(invoker=invoker).parse_project_details("text")

    assert details.app_name == "MedTrack"
    assert details.features == ["Login"]


@pytest.mark.asyncio
async def test_invoker_failure_becomes_flow_error():
    flows = GeminiFlows(invoker=FakeInvoker(error=InvokerError("Gemini response timeout after 120 seconds")))

    with pytest.raises(AIFlowError) as exc_info:
        await flows.validate_requirements("text")

    assert exc_info.value.flow == "validateRequirements"
    assert exc_info.value.status_code == 502


@pytest.mark.asyncio
async def test_unusable_output_becomes_flow_error():
    flows = GeminiFlows(invoker=FakeInvoker("I cannot help with that."))

    with pytest.raises(AIFlowError) as exc_info:
        await flows.analyze_impact_on_change("changes", "ID: TC-001, Title: t")

    assert exc_info.value.flow == "analyzeImpactOnChange"
