"""Services module"""

from src.services.prompt_composer import compose_prompt
from src.services.error_normalizer import normalize_error, parse_provider_error
from src.services.report_pipeline import ReportPipeline

__all__ = ["compose_prompt", "normalize_error", "parse_provider_error", "ReportPipeline"]
