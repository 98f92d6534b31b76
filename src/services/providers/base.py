"""Uniform contract for AI text-generation backends"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any

import httpx

from src.config.exception_config import ConfigurationError
from src.services.error_normalizer import parse_provider_error, provider_transport_error

logger = logging.getLogger(__name__)

FALLBACK_REPORT_TEXT = "Failed to generate report"


@dataclass
class ProviderResult:
    """Text produced by a provider.

    ``is_fallback`` is set when the provider answered successfully but no
    usable text could be found, in which case ``text`` is the placeholder.
    """

    text: str
    provider: str
    is_fallback: bool = False


class ProviderAdapter(ABC):
    """
    Translate a prompt into one backend's request and response shapes.

    Subclasses build the request envelope and know where the generated
    text lives in the success body. Transport, status handling and error
    extraction are shared. Each ``invoke`` makes at most one HTTP call
    and never retries.
    """

    provider_id: str = ""
    display_name: str = ""

    def __init__(self, timeout: float, transport: httpx.AsyncBaseTransport | None = None):
        self.timeout = timeout
        self._transport = transport

    @abstractmethod
    def missing_configuration(self) -> list[str]:
        """Names of required configuration values that are empty"""

    @abstractmethod
    def configuration_error_message(self) -> str:
        """Message for ConfigurationError when something is missing"""

    @abstractmethod
    def build_request(self, prompt: str) -> tuple[str, dict[str, str], dict[str, Any]]:
        """Return (url, headers, json body) for the native request"""

    @abstractmethod
    def extract_text(self, data: Any) -> str | None:
        """Pull the generated text out of a success body, or None"""

    def describe_url(self, url: str) -> str:
        """URL safe for logging"""
        return url

    async def invoke(self, prompt: str) -> ProviderResult:
        """
        Generate report text for the prompt.

        Raises:
            ConfigurationError: Required configuration is missing (no HTTP call made)
            ProviderError: Network failure or non-2xx response
        """
        missing = self.missing_configuration()
        if missing:
            logger.error(f"{self.display_name} configuration incomplete, missing: {missing}")
            raise ConfigurationError(self.configuration_error_message())

        url, headers, body = self.build_request(prompt)
        data = await self._post(url, headers, body)

        text = self.extract_text(data)
        if not text:
            logger.warning(f"{self.display_name} returned no usable text, using fallback")
            return ProviderResult(text=FALLBACK_REPORT_TEXT, provider=self.provider_id, is_fallback=True)

        logger.info(f"{self.display_name} response length: {len(text)} chars")
        return ProviderResult(text=text, provider=self.provider_id)

    async def _post(self, url: str, headers: dict[str, str], body: dict[str, Any]) -> Any:
        logger.info(f"Calling {self.display_name}: {self.describe_url(url)}")
        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
                response = await client.post(url, headers=headers, json=body)
        except httpx.HTTPError as e:
            logger.error(f"{self.display_name} request failed: {e!r}")
            raise provider_transport_error(e, self.display_name) from e

        if not response.is_success:
            logger.error(f"{self.display_name} API error: {response.status_code} {response.text}")
            raise parse_provider_error(response.text, response.status_code, self.display_name)

        try:
            return response.json()
        except ValueError:
            logger.warning(f"{self.display_name} returned a non-JSON success body")
            return None
