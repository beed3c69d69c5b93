from typing import ClassVar

from research_portal.analysis.analyzer import Analyzer
from research_portal.analysis.base import BaseAnalyzer
from research_portal.analysis.client_base import BaseAnalysisClient
from research_portal.analysis.example_client_adapter import ExampleClientAdapter
from research_portal.analysis.openai_client_adapter import OpenAIClientAdapter
from research_portal.config.settings import Settings


class AnalyzerFactory:
    """Creates the analyzer for the configured AI provider."""

    OPENAI_COMPATIBLE_BASE_URLS: ClassVar[dict[str, str]] = {
        "openrouter": "https://openrouter.ai/api/v1",
        "gemini": "https://generativelanguage.googleapis.com/v1beta/openai/",
        "groq": "https://api.groq.com/openai/v1",
        "together": "https://api.together.xyz/v1",
        "deepseek": "https://api.deepseek.com/v1",
        "ollama": "http://localhost:11434/v1",
    }

    @classmethod
    def create(cls, settings: Settings) -> BaseAnalyzer:
        """Create an analyzer from application settings.

        A missing API key is not an error here; the analyzer reports it when an
        analysis is requested.
        """
        provider = settings.analysis_provider.lower()
        client = cls._create_client(provider, settings)
        return Analyzer(
            client=client,
            models=settings.analysis_models,
            temperature=settings.analysis_temperature,
            max_tokens=settings.analysis_max_tokens,
            max_transcript_chars=settings.analysis_max_transcript_chars,
        )

    @classmethod
    def _create_client(cls, provider: str, settings: Settings) -> BaseAnalysisClient:
        if provider == "example":
            return ExampleClientAdapter()
        return OpenAIClientAdapter(
            api_key=cls._resolve_api_key(provider, settings),
            timeout_seconds=settings.analysis_timeout_seconds,
            base_url=cls._resolve_base_url(provider, settings),
            default_headers=cls._resolve_headers(provider, settings),
        )

    @classmethod
    def _resolve_base_url(cls, provider: str, settings: Settings) -> str | None:
        if provider == "openai":
            return None
        if provider == "openai_compatible":
            url = settings.openai_compatible_base_url.strip()
            if not url:
                raise ValueError(
                    "openai_compatible_base_url is required for "
                    "analysis_provider=openai_compatible"
                )
            return url
        default_base_url = cls.OPENAI_COMPATIBLE_BASE_URLS.get(provider)
        if default_base_url is not None:
            return default_base_url
        supported = [
            "example",
            "openai",
            "openai_compatible",
            *sorted(cls.OPENAI_COMPATIBLE_BASE_URLS),
        ]
        raise ValueError(f"Unknown analysis provider '{provider}'. Choose from: {supported}")

    @classmethod
    def _resolve_api_key(cls, provider: str, settings: Settings) -> str:
        key_map = {
            "openai": settings.openai_api_key,
            "openai_compatible": settings.openai_compatible_api_key,
            "openrouter": settings.openrouter_api_key,
            "gemini": settings.gemini_api_key,
            "groq": settings.groq_api_key,
            "together": settings.together_api_key,
            "deepseek": settings.deepseek_api_key,
            "ollama": settings.ollama_api_key,
        }
        return key_map.get(provider, "")

    @classmethod
    def _resolve_headers(cls, provider: str, settings: Settings) -> dict[str, str] | None:
        # OpenRouter attributes requests to the calling app through these headers.
        if provider != "openrouter":
            return None
        return {"HTTP-Referer": settings.app_url, "X-Title": settings.app_title}
