from pydantic import BaseModel, ConfigDict, Field
from typing import List


class TestCase(BaseModel):
    """
    A test case as returned by the generation flow. Only id, title and priority
    are relied upon; any other collaborator-defined fields are kept verbatim.
    """
    __test__ = False

    test_case_id: str = Field(alias="testCaseId")
    title: str
    priority: str = "Medium"

    model_config = ConfigDict(populate_by_name=True, extra="allow")


class GenerateTestCasesOutput(BaseModel):
    test_cases: List[TestCase] = Field(default_factory=list, alias="testCases")

    model_config = ConfigDict(populate_by_name=True)


class ImpactAnalysisOutput(BaseModel):
    impact_analysis: str = Field(alias="impactAnalysis")

    model_config = ConfigDict(populate_by_name=True)
