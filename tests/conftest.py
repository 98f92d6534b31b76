"""Shared pytest fixtures for the report service tests.

Outbound HTTP is faked with ``httpx.MockTransport``; identity and storage
collaborators of the pipeline are replaced with in-memory fakes.
"""

import json
from typing import Any, Callable

import httpx
import pytest

from src.config.exception_config import AuthError
from src.config.settings import AzureOpenAIConfig, GeminiConfig, GenerationConfig, SupabaseConfig
from src.schema.request import CsvFile, GenerateReportRequest
from src.services.identity import Identity
from src.services.report_store import CsvFileMetadata, ReportRecord

VALID_TOKEN = "valid-token"
USER_ID = "user-1"


# =============================================================================
# HTTP Fakes
# =============================================================================


class RecordingTransport(httpx.MockTransport):
    """MockTransport that keeps every request it sees"""

    def __init__(self, handler: Callable[[httpx.Request], httpx.Response]):
        self.requests: list[httpx.Request] = []

        def _record(request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            return handler(request)

        super().__init__(_record)

    @property
    def call_count(self) -> int:
        return len(self.requests)

    def last_json(self) -> Any:
        return json.loads(self.requests[-1].content)


def json_transport(status_code: int, body: Any) -> RecordingTransport:
    return RecordingTransport(lambda request: httpx.Response(status_code, json=body))


def text_transport(status_code: int, text: str) -> RecordingTransport:
    return RecordingTransport(lambda request: httpx.Response(status_code, text=text))


# =============================================================================
# Pipeline Fakes
# =============================================================================


class FakeIdentityResolver:
    def __init__(self) -> None:
        self.calls: list[str] = []

    async def resolve(self, token: str) -> Identity:
        self.calls.append(token)
        if token != VALID_TOKEN:
            raise AuthError("Unauthorized")
        return Identity(id=USER_ID, email="tester@example.com")


class FakeReportStore:
    def __init__(self) -> None:
        self.saved: list[ReportRecord] = []

    async def save(
        self,
        *,
        project_id: str,
        created_by: str,
        report_name: str,
        ai_provider: str,
        report_content: str,
        csv_files_metadata: list[CsvFileMetadata],
    ) -> ReportRecord:
        record = ReportRecord(
            id=f"report-{len(self.saved) + 1}",
            project_id=project_id,
            created_by=created_by,
            report_name=report_name,
            ai_provider=ai_provider,
            report_content=report_content,
            csv_files_metadata=csv_files_metadata,
            created_at="2024-09-02T10:15:00+00:00",
        )
        self.saved.append(record)
        return record


# =============================================================================
# Configuration Fixtures
# =============================================================================


@pytest.fixture
def generation_config() -> GenerationConfig:
    return GenerationConfig(temperature=0.2, top_p=0.8, max_tokens=4000)


@pytest.fixture
def gemini_config(generation_config: GenerationConfig) -> GeminiConfig:
    return GeminiConfig(
        api_key="gemini-test-key",
        base_url="https://gemini.test/v1beta",
        model_id="gemini-1.5-pro",
        generation=generation_config,
        timeout=5.0,
    )


@pytest.fixture
def azure_config(generation_config: GenerationConfig) -> AzureOpenAIConfig:
    return AzureOpenAIConfig(
        api_key="azure-test-key",
        endpoint="https://azure.test",
        deployment="gpt-4o",
        api_version="2024-08-01-preview",
        generation=generation_config,
        timeout=5.0,
    )


@pytest.fixture
def empty_azure_config(generation_config: GenerationConfig) -> AzureOpenAIConfig:
    return AzureOpenAIConfig(
        api_key="",
        endpoint="",
        deployment="",
        api_version="2024-08-01-preview",
        generation=generation_config,
        timeout=5.0,
    )


@pytest.fixture
def supabase_config() -> SupabaseConfig:
    return SupabaseConfig(
        url="https://project.supabase.test",
        service_role_key="service-role-key",
        reports_table="performance_reports",
        timeout=5.0,
    )


# =============================================================================
# Request Fixtures
# =============================================================================


@pytest.fixture
def csv_files() -> list[CsvFile]:
    return [
        CsvFile(name="run1.csv", content="latency,200\n", size=12),
        CsvFile(name="run2.csv", content="latency,180\n"),
    ]


@pytest.fixture
def report_request(csv_files: list[CsvFile]) -> GenerateReportRequest:
    return GenerateReportRequest(
        csv_files=csv_files,
        report_name="Weekly",
        ai_provider="gemini",
        project_id="p1",
    )


@pytest.fixture
def identity_resolver() -> FakeIdentityResolver:
    return FakeIdentityResolver()


@pytest.fixture
def report_store() -> FakeReportStore:
    return FakeReportStore()
