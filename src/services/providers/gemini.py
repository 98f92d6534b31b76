"""Gemini generateContent adapter"""

from typing import Any

import httpx

from src.config.settings import GeminiConfig
from src.services.providers.base import ProviderAdapter


class GeminiAdapter(ProviderAdapter):
    """Single-content generation call against the Gemini API"""

    provider_id = "gemini"
    display_name = "Gemini"

    def __init__(self, config: GeminiConfig, transport: httpx.AsyncBaseTransport | None = None):
        super().__init__(timeout=config.timeout, transport=transport)
        self.config = config

    def missing_configuration(self) -> list[str]:
        return self.config.missing()

    def configuration_error_message(self) -> str:
        if not self.config.api_key:
            return "Google AI API key not configured"
        return "Gemini configuration not complete"

    def build_request(self, prompt: str) -> tuple[str, dict[str, str], dict[str, Any]]:
        url = (
            f"{self.config.base_url}/models/{self.config.model_id}:generateContent"
            f"?key={self.config.api_key}"
        )
        headers = {"Content-Type": "application/json"}
        generation = self.config.generation
        body = {
            "contents": [{"parts": [{"text": prompt}]}],
            "generationConfig": {
                "temperature": generation.temperature,
                "topP": generation.top_p,
                "maxOutputTokens": generation.max_tokens,
            },
        }
        return url, headers, body

    def extract_text(self, data: Any) -> str | None:
        # candidates[0].content.parts[0].text
        try:
            text = data["candidates"][0]["content"]["parts"][0]["text"]
        except (KeyError, IndexError, TypeError):
            return None
        return text if isinstance(text, str) else None

    def describe_url(self, url: str) -> str:
        # Never log the key query parameter
        return url.split("?", 1)[0]
