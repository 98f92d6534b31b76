"""Persist generated reports"""

import logging
from datetime import datetime, timezone
from typing import Any, Sequence

import httpx
from pydantic import BaseModel, Field

from src.config.exception_config import StorageError
from src.config.settings import SupabaseConfig
from src.schema.request import CsvFile

logger = logging.getLogger(__name__)


class CsvFileMetadata(BaseModel):
    """Per-file metadata stored alongside a report"""

    name: str
    size: int = 0
    uploaded_at: str


class ReportRecord(BaseModel):
    """A persisted report row"""

    id: str
    project_id: str
    created_by: str
    report_name: str
    ai_provider: str
    report_content: str
    csv_files_metadata: list[CsvFileMetadata] = Field(default_factory=list)
    created_at: str


def build_files_metadata(
    files: Sequence[CsvFile], uploaded_at: datetime | None = None
) -> list[CsvFileMetadata]:
    """One metadata entry per file, in input order"""
    timestamp = (uploaded_at or datetime.now(timezone.utc)).isoformat()
    return [
        CsvFileMetadata(name=file.name, size=file.size or 0, uploaded_at=timestamp)
        for file in files
    ]


class SupabaseReportStore:
    """Insert-only store backed by a Supabase (PostgREST) table"""

    def __init__(self, config: SupabaseConfig, transport: httpx.AsyncBaseTransport | None = None):
        self.config = config
        self._transport = transport

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
        """
        Insert one report row; id and created_at come from the database.

        Raises:
            StorageError: Insert failed for any reason (cause is logged only)
        """
        row = {
            "project_id": project_id,
            "created_by": created_by,
            "report_name": report_name,
            "ai_provider": ai_provider,
            "report_content": report_content,
            "csv_files_metadata": [meta.model_dump() for meta in csv_files_metadata],
        }

        try:
            inserted = await self._insert(row)
            record = ReportRecord(
                **{
                    **row,
                    **inserted,
                    "id": str(inserted["id"]),
                    "created_at": str(inserted["created_at"]),
                }
            )
        except Exception as e:
            logger.exception(f"Database insert error: {e}")
            raise StorageError() from e

        logger.info(f"Saved report {record.id} for project {record.project_id}")
        return record

    async def _insert(self, row: dict[str, Any]) -> dict[str, Any]:
        if self.config.missing():
            raise RuntimeError(f"Supabase configuration missing: {self.config.missing()}")

        url = f"{self.config.url}/rest/v1/{self.config.reports_table}"
        headers = {
            "apikey": self.config.service_role_key,
            "Authorization": f"Bearer {self.config.service_role_key}",
            "Content-Type": "application/json",
            "Prefer": "return=representation",
        }
        async with httpx.AsyncClient(timeout=self.config.timeout, transport=self._transport) as client:
            response = await client.post(url, headers=headers, json=row)
        response.raise_for_status()

        data = response.json()
        if isinstance(data, list):
            if len(data) != 1:
                raise ValueError(f"Expected one inserted row, got {len(data)}")
            data = data[0]
        return data
