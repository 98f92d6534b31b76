"""Performance report generation endpoint"""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Header, Response
from fastapi.responses import JSONResponse

from src.config import settings
from src.config.exception_config import CORS_HEADERS
from src.schema.request import GenerateReportRequest
from src.schema.response import ErrorResponse, GenerateReportResponse, ReportSummary
from src.services.identity import SupabaseIdentityResolver
from src.services.providers.registry import build_registry
from src.services.report_pipeline import ReportPipeline
from src.services.report_store import SupabaseReportStore

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Reports"])

REPORT_PATH = "/generate-performance-report"


def get_pipeline() -> ReportPipeline:
    """Build the pipeline from settings"""
    supabase_config = settings.supabase_config()
    return ReportPipeline(
        registry=build_registry(settings),
        identity_resolver=SupabaseIdentityResolver(supabase_config),
        store=SupabaseReportStore(supabase_config),
    )


@router.options(REPORT_PATH)
async def generate_report_preflight() -> Response:
    """Cross-origin preflight"""
    return Response(headers=CORS_HEADERS)


@router.post(
    REPORT_PATH,
    response_model=GenerateReportResponse,
    responses={
        400: {"model": ErrorResponse},
        401: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)
async def generate_report_endpoint(
    request: GenerateReportRequest,
    pipeline: Annotated[ReportPipeline, Depends(get_pipeline)],
    authorization: Annotated[str | None, Header()] = None,
) -> JSONResponse:
    """
    Generate a performance report from uploaded CSV results.

    - **csvFiles**: uploaded files, each with name and content
    - **reportName**: name of the report
    - **aiProvider**: `gemini` or `azure-openai`
    - **projectId**: project the report belongs to

    Failures return `{success: false, error, status}` with the status as
    the HTTP code.
    """
    file_count = len(request.csv_files or [])
    logger.info(f"Received report request: provider={request.ai_provider}, files={file_count}")

    record = await pipeline.generate(request, authorization)

    response = GenerateReportResponse(
        report=ReportSummary(
            id=record.id,
            name=record.report_name,
            content=record.report_content,
            ai_provider=record.ai_provider,
            created_at=record.created_at,
        )
    )
    return JSONResponse(content=response.model_dump(by_alias=True), headers=CORS_HEADERS)
