"""Request schemas"""

from pydantic import BaseModel, ConfigDict, Field


class CsvFile(BaseModel):
    """A single uploaded CSV file, passed through as opaque text"""

    name: str = Field(..., description="Original file name")
    content: str = Field(default="", description="Raw file contents")
    size: int | None = Field(default=None, description="File size in bytes")


class GenerateReportRequest(BaseModel):
    """Request model for performance report generation.

    Presence checks happen in the pipeline so that every missing field is
    reported through the same ValidationError path.
    """

    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "csvFiles": [{"name": "run1.csv", "content": "latency,200\n", "size": 12}],
                "reportName": "Weekly",
                "aiProvider": "gemini",
                "projectId": "p1",
            }
        },
    )

    csv_files: list[CsvFile] | None = Field(default=None, alias="csvFiles")
    report_name: str | None = Field(default=None, alias="reportName")
    ai_provider: str | None = Field(default=None, alias="aiProvider")
    project_id: str | None = Field(default=None, alias="projectId")
