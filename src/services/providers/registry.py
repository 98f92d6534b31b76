"""Provider identifier to adapter mapping"""

import logging

from src.config.exception_config import ValidationError
from src.config.settings import Settings
from src.services.providers.azure_openai import AzureOpenAIAdapter
from src.services.providers.base import ProviderAdapter
from src.services.providers.gemini import GeminiAdapter

logger = logging.getLogger(__name__)


class ProviderRegistry:
    """Holds one adapter instance per provider identifier"""

    def __init__(self, adapters: list[ProviderAdapter] | None = None):
        self._adapters: dict[str, ProviderAdapter] = {}
        for adapter in adapters or []:
            self.register(adapter)

    def register(self, adapter: ProviderAdapter) -> None:
        if adapter.provider_id in self._adapters:
            raise ValueError(f"Provider already registered: {adapter.provider_id}")
        self._adapters[adapter.provider_id] = adapter

    def get(self, provider_id: str) -> ProviderAdapter:
        """
        Look up the adapter for a provider identifier.

        Raises:
            ValidationError: No adapter is registered under the identifier
        """
        adapter = self._adapters.get(provider_id)
        if adapter is None:
            logger.warning(f"Unknown AI provider requested: {provider_id!r}")
            raise ValidationError("Invalid AI provider specified")
        return adapter

    def provider_ids(self) -> list[str]:
        return list(self._adapters)


def build_registry(settings: Settings) -> ProviderRegistry:
    """Create the registry of every supported provider from settings"""
    return ProviderRegistry(
        [
            GeminiAdapter(settings.gemini_config()),
            AzureOpenAIAdapter(settings.azure_openai_config()),
        ]
    )
