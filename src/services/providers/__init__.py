"""AI provider adapters"""

from src.services.providers.base import FALLBACK_REPORT_TEXT, ProviderAdapter, ProviderResult
from src.services.providers.gemini import GeminiAdapter
from src.services.providers.azure_openai import AzureOpenAIAdapter
from src.services.providers.registry import ProviderRegistry, build_registry

__all__ = [
    "FALLBACK_REPORT_TEXT",
    "ProviderAdapter",
    "ProviderResult",
    "GeminiAdapter",
    "AzureOpenAIAdapter",
    "ProviderRegistry",
    "build_registry",
]
