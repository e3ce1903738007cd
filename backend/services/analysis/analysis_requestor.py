import asyncio
import logging
from typing import List, Optional

from core.exceptions import AnalysisFailedError, AnalysisInProgressError, InputValidationError
from schemas.requirements import AnalysisResult
from services.llm.ai_flows import AIFlows
from services.notifications.notification_center import NotificationCenter

logger = logging.getLogger(__name__)


class AnalysisRequestor:
    """
    Runs requirement validation and the compliance check as one joined operation.

    Both calls are issued before either result is used; the result is stored
    only when both succeed, so a caller never sees one half without the other.
    """

    def __init__(self, flows: AIFlows, notifications: Optional[NotificationCenter] = None):
        self.flows = flows
        self.notifications = notifications or NotificationCenter()
        self._result: Optional[AnalysisResult] = None
        self._pending = False

    @property
    def is_pending(self) -> bool:
        return self._pending

    @property
    def result(self) -> Optional[AnalysisResult]:
        return self._result

    async def analyze(self, requirements_text: str, standards: List[str]) -> AnalysisResult:
        if not (requirements_text or "").strip():
            self.notifications.error("Input Required", "Please provide requirements to analyze.")
            raise InputValidationError("Requirements text is empty", field="requirements")
        if not standards:
            self.notifications.error("Selection Required", "Please select at least one compliance standard.")
            raise InputValidationError("No compliance standard selected", field="standards")
        if self._pending:
            raise AnalysisInProgressError()

        self._result = None
        self._pending = True
        logger.info(
            "analysis_requestor: starting analysis chars=%d standards=%s",
            len(requirements_text), standards,
        )
        validation_task = asyncio.ensure_future(self.flows.validate_requirements(requirements_text))
        compliance_task = asyncio.ensure_future(
            self.flows.compliance_check(requirements_text, ", ".join(standards))
        )
        try:
            validation, compliance = await asyncio.gather(validation_task, compliance_task)
        except Exception as e:
            for task in (validation_task, compliance_task):
                if not task.done():
                    task.cancel()
            await asyncio.gather(validation_task, compliance_task, return_exceptions=True)
            logger.error("analysis_requestor: analysis failed: %s", e)
            self.notifications.error("Analysis Failed", "An error occurred during the analysis.")
            raise AnalysisFailedError(str(e)) from e
        finally:
            self._pending = False

        self._result = AnalysisResult(validation=validation, compliance=compliance)
        logger.info(
            "analysis_requestor: analysis complete is_valid=%s",
            validation.completeness_validation.is_valid,
        )
        self.notifications.notify("Analysis Complete", "Requirements have been analyzed.")
        return self._result

    def clear(self) -> None:
        self._result = None
