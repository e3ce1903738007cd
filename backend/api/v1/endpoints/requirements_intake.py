import logging
from typing import List

from fastapi import APIRouter, Depends, File, UploadFile

from core.config import ComplianceConfigs
from core.exceptions import ResourceNotFoundError
from deps import get_controller
from schemas.requirements import (
    AnalysisResult,
    AnalyzeRequest,
    ComplianceOption,
    ComplianceOptionsResponse,
    ProjectDetails,
    RequirementsTextResponse,
    SourcesResponse,
    TranscriptRequest,
    UploadedSourceSchema,
)
from services.workflow.workbench_controller import WorkbenchController


router = APIRouter()

logger = logging.getLogger(__name__)

PREVIEW_CHARS = 500


def _sources_response(controller: WorkbenchController) -> SourcesResponse:
    collector = controller.collector
    return SourcesResponse(
        sources=[UploadedSourceSchema.model_validate(s) for s in collector.sources],
        combined_text=collector.combined_text,
        is_ready=collector.is_ready,
    )


@router.get("/compliance-options", response_model=ComplianceOptionsResponse, response_model_by_alias=True)
async def get_compliance_options():
    return ComplianceOptionsResponse(
        options=[ComplianceOption(id=k, label=v) for k, v in ComplianceConfigs.OPTIONS.items()],
        default_selection=ComplianceConfigs.DEFAULT_SELECTION,
    )


@router.post("/sources", response_model=SourcesResponse, response_model_by_alias=True)
async def upload_sources(
    files: List[UploadFile] = File(...),
    controller: WorkbenchController = Depends(get_controller),
):
    """
    Add dropped files as requirement sources.

    Files are read while the request is open; the response lists every source
    with its final progress. A file that could not be read stays below 100 and
    carries an `error`.
    """
    logger.info("requirements_intake: received %d file(s)", len(files))
    controller.collector.add_sources(files)
    await controller.collector.drain()
    return _sources_response(controller)


@router.post("/sources/transcript", response_model=SourcesResponse, response_model_by_alias=True)
async def add_transcript(body: TranscriptRequest, controller: WorkbenchController = Depends(get_controller)):
    source = controller.collector.add_transcript(body.transcript, body.listening)
    if source is None:
        logger.info("requirements_intake: transcript ignored listening=%s", body.listening)
    return _sources_response(controller)


@router.get("/sources", response_model=SourcesResponse, response_model_by_alias=True)
async def list_sources(controller: WorkbenchController = Depends(get_controller)):
    return _sources_response(controller)


@router.delete("/sources/{name}", response_model=SourcesResponse, response_model_by_alias=True)
async def cancel_source(name: str, controller: WorkbenchController = Depends(get_controller)):
    controller.collector.cancel_source(name)
    return _sources_response(controller)


@router.get("/text", response_model=RequirementsTextResponse, response_model_by_alias=True)
async def get_requirements_text(controller: WorkbenchController = Depends(get_controller)):
    text = controller.requirements_text
    preview = text if len(text) <= PREVIEW_CHARS else text[:PREVIEW_CHARS] + "..."
    return RequirementsTextResponse(
        requirements=text,
        preview=preview,
        is_ready=controller.collector.is_ready,
    )


@router.post("/analyze", response_model=AnalysisResult, response_model_by_alias=True)
async def analyze_requirements(body: AnalyzeRequest, controller: WorkbenchController = Depends(get_controller)):
    """
    Run validation and the compliance check on the combined requirements text.

    Either both results are returned or the call fails as a whole (502).
    """
    return await controller.analyze(body.standards)


@router.get("/analysis", response_model=AnalysisResult, response_model_by_alias=True)
async def get_analysis(controller: WorkbenchController = Depends(get_controller)):
    result = controller.requestor.result
    if result is None:
        raise ResourceNotFoundError("Analysis", "current")
    return result


@router.post("/project-details", response_model=ProjectDetails, response_model_by_alias=True)
async def parse_project_details(controller: WorkbenchController = Depends(get_controller)):
    return await controller.parse_project_details()


@router.post("/reset", response_model=SourcesResponse, response_model_by_alias=True)
async def reset_intake(controller: WorkbenchController = Depends(get_controller)):
    controller.reset_intake()
    return _sources_response(controller)
