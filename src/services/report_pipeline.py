"""Report generation pipeline: validate, authenticate, compose, invoke, persist"""

import logging
from dataclasses import dataclass
from typing import Protocol

from src.config.exception_config import ValidationError
from src.schema.request import CsvFile, GenerateReportRequest
from src.services.identity import Identity, extract_bearer_token
from src.services.prompt_composer import compose_prompt
from src.services.providers.registry import ProviderRegistry
from src.services.report_store import CsvFileMetadata, ReportRecord, build_files_metadata

logger = logging.getLogger(__name__)


class IdentityResolver(Protocol):
    async def resolve(self, token: str) -> Identity: ...


class ReportStore(Protocol):
    async def save(
        self,
        *,
        project_id: str,
        created_by: str,
        report_name: str,
        ai_provider: str,
        report_content: str,
        csv_files_metadata: list[CsvFileMetadata],
    ) -> ReportRecord: ...


@dataclass(frozen=True)
class ValidatedRequest:
    """Request with every required field present"""

    project_id: str
    report_name: str
    ai_provider: str
    csv_files: list[CsvFile]


def validate_request(request: GenerateReportRequest) -> ValidatedRequest:
    """
    Check required fields before anything else happens.

    Raises:
        ValidationError: A required field is missing or no file has content
    """
    if not request.csv_files:
        raise ValidationError("CSV files are required")
    if not any(file.content for file in request.csv_files):
        raise ValidationError("At least one CSV file must have content")
    if not request.report_name or not request.ai_provider or not request.project_id:
        raise ValidationError("Report name, AI provider, and project ID are required")

    return ValidatedRequest(
        project_id=request.project_id,
        report_name=request.report_name,
        ai_provider=request.ai_provider,
        csv_files=list(request.csv_files),
    )


class ReportPipeline:
    """
    Runs one request through to a persisted report.

    Steps run strictly in order and each request is processed once with
    no retries; any failure raises a ReportServiceException subclass.
    """

    def __init__(
        self,
        registry: ProviderRegistry,
        identity_resolver: IdentityResolver,
        store: ReportStore,
    ):
        self.registry = registry
        self.identity_resolver = identity_resolver
        self.store = store

    async def generate(
        self, request: GenerateReportRequest, authorization: str | None
    ) -> ReportRecord:
        validated = validate_request(request)
        logger.debug("Request validated")

        token = extract_bearer_token(authorization)
        identity = await self.identity_resolver.resolve(token)
        logger.debug(f"Authenticated user {identity.id}")

        prompt = compose_prompt(validated.report_name, validated.csv_files)
        logger.debug(f"Composed prompt of {len(prompt)} chars from {len(validated.csv_files)} files")

        adapter = self.registry.get(validated.ai_provider)
        logger.info(f"Generating performance report using {adapter.provider_id}")
        result = await adapter.invoke(prompt)

        return await self.store.save(
            project_id=validated.project_id,
            created_by=identity.id,
            report_name=validated.report_name,
            ai_provider=adapter.provider_id,
            report_content=result.text,
            csv_files_metadata=build_files_metadata(validated.csv_files),
        )
