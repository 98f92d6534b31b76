"""Azure OpenAI chat-completions adapter"""

from typing import Any

import httpx

from src.config.settings import AzureOpenAIConfig
from src.services.prompt_composer import SYSTEM_PROMPT
from src.services.providers.base import ProviderAdapter


class AzureOpenAIAdapter(ProviderAdapter):
    """Chat-completion call against an Azure OpenAI deployment"""

    provider_id = "azure-openai"
    display_name = "Azure OpenAI"

    def __init__(
        self,
        config: AzureOpenAIConfig,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        super().__init__(timeout=config.timeout, transport=transport)
        self.config = config

    def missing_configuration(self) -> list[str]:
        return self.config.missing()

    def configuration_error_message(self) -> str:
        return "Azure OpenAI configuration not complete"

    def build_request(self, prompt: str) -> tuple[str, dict[str, str], dict[str, Any]]:
        url = (
            f"{self.config.endpoint}/openai/deployments/{self.config.deployment}"
            f"/chat/completions?api-version={self.config.api_version}"
        )
        headers = {
            "Content-Type": "application/json",
            "api-key": self.config.api_key,
        }
        generation = self.config.generation
        body = {
            "messages": [
                {"role": "system", "content": SYSTEM_PROMPT},
                {"role": "user", "content": prompt},
            ],
            "max_tokens": generation.max_tokens,
            "temperature": generation.temperature,
        }
        return url, headers, body

    def extract_text(self, data: Any) -> str | None:
        # choices[0].message.content
        try:
            text = data["choices"][0]["message"]["content"]
        except (KeyError, IndexError, TypeError):
            return None
        return text if isinstance(text, str) else None
