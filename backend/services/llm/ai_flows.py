"""
External AI collaborators of the workbench.

`AIFlows` is the interface the services depend on; `GeminiFlows` implements it
by prompting Gemini and validating the JSON it returns. Tests substitute their
own implementation.
"""

import importlib
import json
import logging
import os
from typing import List, Optional, Protocol, Type, TypeVar

from langchain_core.exceptions import OutputParserException
from pydantic import BaseModel

from core.env_config import get_env_variable
from core.exceptions import AIFlowError
from schemas.requirements import ComplianceCheckOutput, ProjectDetails, ValidateRequirementsOutput
from schemas.testcases import GenerateTestCasesOutput, ImpactAnalysisOutput
from services.llm.gemini_invoker import InvokerError, invoke_freeform_prompt_async
from services.llm.json_output_parser import format_instructions, parse_flow_output

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=BaseModel)


class AIFlows(Protocol):
    async def validate_requirements(self, requirements: str) -> ValidateRequirementsOutput: ...

    async def compliance_check(self, requirements: str, compliance_standards: str) -> ComplianceCheckOutput: ...

    async def generate_test_cases(
        self, scenario: str, compliance_standards: List[str], priority: str
    ) -> GenerateTestCasesOutput: ...

    async def analyze_impact_on_change(
        self, requirement_changes: str, existing_test_cases: str
    ) -> ImpactAnalysisOutput: ...

    async def parse_project_details(self, requirements: str) -> ProjectDetails: ...


def load_prompt(name: str) -> str:
    """
    Load a base prompt.

    Resolution order: <NAME>_PROMPT_FILE (path on disk), <NAME>_PROMPT_MODULE
    (module whose docstring is the prompt), then services.llm.prompts.<name>_prompt.
    """
    env_prefix = name.upper()
    prompt_file = get_env_variable(f"{env_prefix}_PROMPT_FILE", "").strip()
    if prompt_file and os.path.exists(prompt_file):
        with open(prompt_file, "r", encoding="utf-8") as f:
            return f.read()

    mod_path = get_env_variable(f"{env_prefix}_PROMPT_MODULE", "").strip() or f"services.llm.prompts.{name}_prompt"
    mod = importlib.import_module(mod_path)
    return mod.__doc__ or ""


class GeminiFlows:
    """Gemini-backed implementation of AIFlows."""

    def __init__(self, model_name: Optional[str] = None, timeout_seconds: Optional[float] = None, invoker=None):
        self.model_name = model_name
        self.timeout_seconds = timeout_seconds
        self._invoke = invoker or invoke_freeform_prompt_async

    async def validate_requirements(self, requirements: str) -> ValidateRequirementsOutput:
        return await self._run(
            "validateRequirements",
            "requirements_validation",
            f"### Requirements:\n{requirements}",
            ValidateRequirementsOutput,
        )

    async def compliance_check(self, requirements: str, compliance_standards: str) -> ComplianceCheckOutput:
        return await self._run(
            "complianceCheck",
            "compliance_check",
            f"### Selected Compliance Standards:\n{compliance_standards}\n\n### Requirements:\n{requirements}",
            ComplianceCheckOutput,
        )

    async def generate_test_cases(
        self, scenario: str, compliance_standards: List[str], priority: str
    ) -> GenerateTestCasesOutput:
        return await self._run(
            "generateTestCases",
            "testcase_generator",
            (
                f"### Test Scenario:\n{scenario}\n\n"
                f"### Priority:\n{priority}\n\n"
                f"### Compliance Standards:\n{json.dumps(compliance_standards)}"
            ),
            GenerateTestCasesOutput,
            list_key="testCases",
        )

    async def analyze_impact_on_change(
        self, requirement_changes: str, existing_test_cases: str
    ) -> ImpactAnalysisOutput:
        return await self._run(
            "analyzeImpactOnChange",
            "impact_analysis",
            f"### Change Description:\n{requirement_changes}\n\n### Existing Test Cases:\n{existing_test_cases}",
            ImpactAnalysisOutput,
        )

    async def parse_project_details(self, requirements: str) -> ProjectDetails:
        return await self._run(
            "parseProjectDetails",
            "project_details",
            f"### Requirements:\n{requirements}",
            ProjectDetails,
        )

    async def _run(
        self,
        flow: str,
        prompt_name: str,
        dynamic_parts: str,
        model_cls: Type[T],
        list_key: Optional[str] = None,
    ) -> T:
        try:
            base_prompt = load_prompt(prompt_name)
        except ImportError as e:
            raise AIFlowError(flow, f"prompt '{prompt_name}' could not be loaded: {e}") from e

        prompt = f"{base_prompt}\n\n{format_instructions(model_cls)}\n\n{dynamic_parts}"
        logger.info("ai_flows: invoking %s prompt_chars=%d", flow, len(prompt))
        try:
            raw = await self._invoke(prompt, model_name=self.model_name, timeout_seconds=self.timeout_seconds)
        except InvokerError as e:
            logger.error("ai_flows: %s invocation failed: %s", flow, e)
            raise AIFlowError(flow, str(e)) from e

        try:
            result = parse_flow_output(raw, model_cls, list_key=list_key)
        except OutputParserException as e:
            logger.error("ai_flows: %s returned unusable output: %s", flow, e)
            raise AIFlowError(flow, "response was not valid JSON for the expected schema") from e

        logger.info("ai_flows: %s completed", flow)
        return result
