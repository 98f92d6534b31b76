"""Application settings and configuration"""

import logging
import os
from dataclasses import dataclass

from pydantic import BaseModel
from dotenv import load_dotenv

load_dotenv()


def get_env(key: str, default: str = "") -> str:
    return os.getenv(key, default)


def get_env_bool(key: str, default: str = "false") -> bool:
    return os.getenv(key, default).lower() in ("true", "1", "yes")


def get_env_int(key: str, default: str = "0") -> int:
    return int(os.getenv(key, default))


def get_env_float(key: str, default: str = "0") -> float:
    return float(os.getenv(key, default))


@dataclass(frozen=True)
class GenerationConfig:
    """Sampling parameters shared by every provider"""

    temperature: float = 0.2
    top_p: float = 0.8
    max_tokens: int = 4000


@dataclass(frozen=True)
class GeminiConfig:
    """Configuration for the Gemini generateContent backend"""

    api_key: str
    base_url: str
    model_id: str
    generation: GenerationConfig
    timeout: float

    def missing(self) -> list[str]:
        return [name for name in ("api_key", "base_url", "model_id") if not getattr(self, name)]


@dataclass(frozen=True)
class AzureOpenAIConfig:
    """Configuration for an Azure OpenAI chat-completions deployment"""

    api_key: str
    endpoint: str
    deployment: str
    api_version: str
    generation: GenerationConfig
    timeout: float

    def missing(self) -> list[str]:
        return [
            name
            for name in ("api_key", "endpoint", "deployment", "api_version")
            if not getattr(self, name)
        ]


@dataclass(frozen=True)
class SupabaseConfig:
    """Identity service and report table location"""

    url: str
    service_role_key: str
    reports_table: str
    timeout: float

    def missing(self) -> list[str]:
        return [name for name in ("url", "service_role_key") if not getattr(self, name)]


class Settings(BaseModel):
    """Application settings"""

    # Application
    debug: bool = get_env_bool("DEBUG", "false")
    app_name: str = "perf-report-service"
    api_port: int = get_env_int("API_PORT", "3007")
    log_level: str = get_env("LOG_LEVEL", "INFO")

    # CORS
    cors_origins: list[str] = ["*"]
    cors_headers: list[str] = ["authorization", "x-client-info", "apikey", "content-type"]

    # Gemini
    google_ai_api_key: str = get_env("GOOGLE_AI_API_KEY", "")
    gemini_base_url: str = get_env(
        "GEMINI_BASE_URL", "https://generativelanguage.googleapis.com/v1beta"
    )
    gemini_model_id: str = get_env("GEMINI_MODEL_ID", "gemini-1.5-pro")

    # Azure OpenAI
    azure_openai_api_key: str = get_env("AZURE_OPENAI_API_KEY", "")
    azure_openai_endpoint: str = get_env("AZURE_OPENAI_ENDPOINT", "")
    azure_openai_deployment_name: str = get_env("AZURE_OPENAI_DEPLOYMENT_NAME", "")
    azure_openai_api_version: str = get_env("AZURE_OPENAI_API_VERSION", "2024-08-01-preview")

    # Generation
    generation_temperature: float = get_env_float("GENERATION_TEMPERATURE", "0.2")
    generation_top_p: float = get_env_float("GENERATION_TOP_P", "0.8")
    generation_max_tokens: int = get_env_int("GENERATION_MAX_TOKENS", "4000")
    provider_timeout: float = get_env_float("PROVIDER_TIMEOUT", "120")

    # Supabase (identity + report storage)
    supabase_url: str = get_env("SUPABASE_URL", "")
    supabase_service_role_key: str = get_env("SUPABASE_SERVICE_ROLE_KEY", "")
    reports_table: str = get_env("REPORTS_TABLE", "performance_reports")
    supabase_timeout: float = get_env_float("SUPABASE_TIMEOUT", "10")

    @property
    def generation(self) -> GenerationConfig:
        return GenerationConfig(
            temperature=self.generation_temperature,
            top_p=self.generation_top_p,
            max_tokens=self.generation_max_tokens,
        )

    def gemini_config(self) -> GeminiConfig:
        return GeminiConfig(
            api_key=self.google_ai_api_key,
            base_url=self.gemini_base_url.rstrip("/"),
            model_id=self.gemini_model_id,
            generation=self.generation,
            timeout=self.provider_timeout,
        )

    def azure_openai_config(self) -> AzureOpenAIConfig:
        return AzureOpenAIConfig(
            api_key=self.azure_openai_api_key,
            endpoint=self.azure_openai_endpoint.rstrip("/"),
            deployment=self.azure_openai_deployment_name,
            api_version=self.azure_openai_api_version,
            generation=self.generation,
            timeout=self.provider_timeout,
        )

    def supabase_config(self) -> SupabaseConfig:
        return SupabaseConfig(
            url=self.supabase_url.rstrip("/"),
            service_role_key=self.supabase_service_role_key,
            reports_table=self.reports_table,
            timeout=self.supabase_timeout,
        )

    def print_config(self) -> None:
        """Print configuration (masking sensitive values)"""
        logger = logging.getLogger(__name__)
        config_dict = self.model_dump()

        # Mask sensitive keys
        sensitive_keys = [
            "google_ai_api_key",
            "azure_openai_api_key",
            "supabase_service_role_key",
        ]
        for key in sensitive_keys:
            if key in config_dict and config_dict[key]:
                config_dict[key] = config_dict[key][:8] + "***"

        logger.info(f"Configuration: {config_dict}")


settings = Settings()
