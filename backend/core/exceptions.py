"""
Custom exceptions for the requirements workbench.

Services raise these instead of generic exceptions so the API layer can map
them to status codes in one place (see main.py).

Usage:
    from core.exceptions import ScenarioNotFoundError

    if scenario is None:
        raise ScenarioNotFoundError(scenario_id)
"""

from typing import Any, Dict, Optional


class WorkbenchError(Exception):
    """Base exception for all workbench errors"""

    status_code = 500

    def __init__(
        self,
        message: str,
        code: str = "INTERNAL_ERROR",
        details: Optional[Dict[str, Any]] = None
    ):
        self.message = message
        self.code = code
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "code": self.code,
            "message": self.message,
            "details": self.details
        }


# ============================================
# Input Validation Errors (422)
# ============================================

class InputValidationError(WorkbenchError):
    """User input rejected before any external call was made"""

    status_code = 422

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(
            message,
            code="INPUT_REQUIRED",
            details={"field": field} if field else None
        )


# ============================================
# Resource Errors (404)
# ============================================

class ResourceNotFoundError(WorkbenchError):
    """Base class for not found errors"""

    status_code = 404

    def __init__(self, resource_type: str, resource_id: str):
        super().__init__(
            f"{resource_type} with ID '{resource_id}' not found",
            code=f"{resource_type.upper().replace(' ', '_')}_NOT_FOUND",
            details={"resource_type": resource_type, "resource_id": resource_id}
        )


class ScenarioNotFoundError(ResourceNotFoundError):
    """Scenario not found"""

    def __init__(self, scenario_id: str):
        super().__init__("Scenario", scenario_id)


class SourceNotFoundError(ResourceNotFoundError):
    """Uploaded source not found"""

    def __init__(self, name: str):
        super().__init__("Source", name)


class PendingEditNotFoundError(ResourceNotFoundError):
    """No edit is awaiting impact confirmation for the scenario"""

    def __init__(self, scenario_id: str):
        super().__init__("Pending edit", scenario_id)


# ============================================
# Conflict Errors (409)
# ============================================

class ConflictError(WorkbenchError):
    """Requested action collides with one already in flight"""

    status_code = 409


class AnalysisInProgressError(ConflictError):
    def __init__(self):
        super().__init__("An analysis is already running", code="ANALYSIS_IN_PROGRESS")


class GenerationInProgressError(ConflictError):
    def __init__(self, scenario_id: str):
        super().__init__(
            f"Test cases are already being generated for scenario '{scenario_id}'",
            code="GENERATION_IN_PROGRESS",
            details={"scenario_id": scenario_id}
        )


# ============================================
# External Call Errors (502)
# ============================================

class ExternalCallError(WorkbenchError):
    """An external AI collaborator call failed"""

    status_code = 502


class AIFlowError(ExternalCallError):
    """A single AI flow invocation failed or returned unusable output"""

    def __init__(self, flow: str, message: str):
        super().__init__(
            f"{flow} failed: {message}",
            code="AI_FLOW_FAILED",
            details={"flow": flow}
        )
        self.flow = flow


class AnalysisFailedError(ExternalCallError):
    def __init__(self, reason: str):
        super().__init__(
            "An error occurred during the analysis.",
            code="ANALYSIS_FAILED",
            details={"reason": reason}
        )


class TestCaseGenerationError(ExternalCallError):
    __test__ = False

    def __init__(self, scenario_id: str, reason: str):
        super().__init__(
            f"Test case generation failed for scenario '{scenario_id}'",
            code="TEST_CASE_GENERATION_FAILED",
            details={"scenario_id": scenario_id, "reason": reason}
        )
