from pydantic import BaseModel, ConfigDict, Field
from typing import List, Optional

from models.ingestion.uploaded_source import SourceOrigin


# ---------------------------------------------------------------------------
# AI flow contracts
# ---------------------------------------------------------------------------

class MissingElement(BaseModel):
    element: str
    reason: str


class CompletenessValidation(BaseModel):
    is_valid: bool = Field(alias="isValid")
    missing_elements: List[MissingElement] = Field(default_factory=list, alias="missingElements")

    model_config = ConfigDict(populate_by_name=True)


class ValidateRequirementsOutput(BaseModel):
    completeness_validation: CompletenessValidation = Field(alias="completenessValidation")

    model_config = ConfigDict(populate_by_name=True)


class ComplianceCheckOutput(BaseModel):
    compliance_report: str = Field(alias="complianceReport")
    suggestions: str

    model_config = ConfigDict(populate_by_name=True)


class ProjectDetails(BaseModel):
    app_name: str = Field(default="", alias="appName")
    objective: str = ""
    features: List[str] = Field(default_factory=list)
    tech_stack: List[str] = Field(default_factory=list, alias="techStack")

    model_config = ConfigDict(populate_by_name=True)


# ---------------------------------------------------------------------------
# Intake state
# ---------------------------------------------------------------------------

class AnalysisResult(BaseModel):
    validation: ValidateRequirementsOutput
    compliance: ComplianceCheckOutput


class AnalysisHandoff(BaseModel):
    """Navigation state handed from the intake screen to the scenario screen."""
    validation: ValidateRequirementsOutput
    compliance: ComplianceCheckOutput
    requirements: str


class UploadedSourceSchema(BaseModel):
    name: str
    size: int
    origin: SourceOrigin
    progress: int
    content: str
    error: Optional[str] = None

    model_config = ConfigDict(from_attributes=True)


class SourcesResponse(BaseModel):
    sources: List[UploadedSourceSchema]
    combined_text: str = Field(alias="combinedText")
    is_ready: bool = Field(alias="isReady")

    model_config = ConfigDict(populate_by_name=True)


class RequirementsTextResponse(BaseModel):
    requirements: str
    preview: str
    is_ready: bool = Field(alias="isReady")

    model_config = ConfigDict(populate_by_name=True)


class ComplianceOption(BaseModel):
    id: str
    label: str


class ComplianceOptionsResponse(BaseModel):
    options: List[ComplianceOption]
    default_selection: List[str] = Field(alias="defaultSelection")

    model_config = ConfigDict(populate_by_name=True)


# ---------------------------------------------------------------------------
# Requests
# ---------------------------------------------------------------------------

class TranscriptRequest(BaseModel):
    transcript: str
    listening: bool = False


class AnalyzeRequest(BaseModel):
    standards: List[str] = Field(default_factory=list, description="Compliance standard ids, e.g. FDA, GDPR")
