from dataclasses import dataclass, field
from typing import List, Literal, Optional

from schemas.testcases import TestCase


Priority = Literal["High", "Medium", "Low"]
PRIORITIES = ("High", "Medium", "Low")


@dataclass
class Scenario:
    """
    A user-managed unit of testable intent. Owns its test cases exclusively.
    The provenance fields are only set for scenarios derived from parsed requirements.
    """

    id: str
    title: str
    description: str
    priority: Priority = "Medium"
    test_cases: List[TestCase] = field(default_factory=list)
    are_tests_generating: bool = False
    requirement_id: Optional[str] = None
    requirement_type: Optional[str] = None
    requirement_source: Optional[str] = None
    # bumped on every applied edit
    revision: int = 0

    def __repr__(self):
        return f"<Scenario(id='{self.id}', title='{self.title}', test_cases={len(self.test_cases)})>"


@dataclass
class PendingEdit:
    """Edit values held back until the user confirms the impact report."""

    scenario_id: str
    title: str
    description: str
    priority: Priority
    impact_analysis: str
