import logging
from typing import List, Optional

from core.config import ComplianceConfigs
from models.scenarios.scenario import Scenario
from schemas.testcases import TestCase
from services.llm.ai_flows import AIFlows

logger = logging.getLogger(__name__)


class TestCaseGenerator:
    """Translates a scenario into a generateTestCases call and back."""

    __test__ = False

    def __init__(self, flows: AIFlows, standards: Optional[List[str]] = None):
        self.flows = flows
        self.standards = list(standards or ComplianceConfigs.DEFAULT_GENERATION_STANDARDS)

    async def generate(self, scenario: Scenario) -> List[TestCase]:
        logger.info(
            "testcase_generator: generating for scenario=%s priority=%s standards=%s",
            scenario.id, scenario.priority, self.standards,
        )
        output = await self.flows.generate_test_cases(scenario.description, self.standards, scenario.priority)
        logger.info("testcase_generator: scenario=%s received %d test case(s)", scenario.id, len(output.test_cases))
        return list(output.test_cases)


def format_existing_test_cases(test_cases: List[TestCase]) -> str:
    return "\n".join(f"ID: {tc.test_case_id}, Title: {tc.title}" for tc in test_cases)
