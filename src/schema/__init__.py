from src.schema.request import CsvFile, GenerateReportRequest
from src.schema.response import (
    ErrorResponse,
    GenerateReportResponse,
    ReportSummary,
)

__all__ = [
    "CsvFile",
    "GenerateReportRequest",
    "ErrorResponse",
    "GenerateReportResponse",
    "ReportSummary",
]
