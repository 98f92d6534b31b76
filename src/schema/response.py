"""Response schemas"""

from pydantic import BaseModel, ConfigDict, Field


class ReportSummary(BaseModel):
    """Summary of a persisted report returned to the caller"""

    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(..., description="Identifier assigned by the store")
    name: str = Field(..., description="Report name")
    content: str = Field(..., description="Generated report text")
    ai_provider: str = Field(..., alias="aiProvider")
    created_at: str = Field(..., alias="createdAt")


class GenerateReportResponse(BaseModel):
    """Response model for a successful generation"""

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "success": True,
                "report": {
                    "id": "8d3c1f0e-2f1b-4a8e-9d55-1c2b3a4d5e6f",
                    "name": "Weekly",
                    "content": "**Executive Summary** ...",
                    "aiProvider": "gemini",
                    "createdAt": "2024-09-02T10:15:00.000000+00:00",
                },
            }
        }
    )

    success: bool = True
    report: ReportSummary


class ErrorResponse(BaseModel):
    """Body returned for every failed request"""

    success: bool = False
    error: str
    status: int
