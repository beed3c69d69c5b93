"""Tests for AnalyzerFactory."""

from unittest.mock import patch

import pytest

from research_portal.analysis.analyzer import Analyzer
from research_portal.analysis.exceptions import AnalysisConfigurationError
from research_portal.analysis.factory import AnalyzerFactory
from research_portal.config.settings import Settings


class TestAnalyzerFactory:
    def test_example_provider_works_offline(self) -> None:
        settings = Settings(analysis_provider="example", analysis_models=["example"])
        analyzer = AnalyzerFactory.create(settings)
        assert isinstance(analyzer, Analyzer)
        result = analyzer.analyze("any transcript")
        assert result.management_tone.sentiment == "neutral"

    def test_openrouter_is_default_with_attribution_headers(self) -> None:
        settings = Settings(
            openrouter_api_key="or-key",
            app_url="https://portal.example.com",
            analysis_timeout_seconds=15,
        )
        with patch("research_portal.analysis.factory.OpenAIClientAdapter") as mock_adapter:
            AnalyzerFactory.create(settings)
        mock_adapter.assert_called_once_with(
            api_key="or-key",
            timeout_seconds=15,
            base_url="https://openrouter.ai/api/v1",
            default_headers={
                "HTTP-Referer": "https://portal.example.com",
                "X-Title": "Research Portal",
            },
        )

    def test_uses_openai_settings(self) -> None:
        settings = Settings(analysis_provider="openai", openai_api_key="openai-key")
        with patch("research_portal.analysis.factory.OpenAIClientAdapter") as mock_adapter:
            AnalyzerFactory.create(settings)
        mock_adapter.assert_called_once_with(
            api_key="openai-key",
            timeout_seconds=60,
            base_url=None,
            default_headers=None,
        )

    def test_gemini_uses_openai_compatible_endpoint(self) -> None:
        settings = Settings(analysis_provider="gemini", gemini_api_key="g")
        with patch("research_portal.analysis.factory.OpenAIClientAdapter") as mock_adapter:
            AnalyzerFactory.create(settings)
        kwargs = mock_adapter.call_args.kwargs
        assert kwargs["api_key"] == "g"
        assert kwargs["base_url"].startswith("https://generativelanguage.googleapis.com/")

    def test_uses_custom_base_url_for_openai_compatible(self) -> None:
        settings = Settings(
            analysis_provider="openai_compatible",
            openai_compatible_api_key="k",
            openai_compatible_base_url="https://example.com/v1",
        )
        with patch("research_portal.analysis.factory.OpenAIClientAdapter") as mock_adapter:
            AnalyzerFactory.create(settings)
        assert mock_adapter.call_args.kwargs["base_url"] == "https://example.com/v1"

    def test_openai_compatible_requires_base_url(self) -> None:
        settings = Settings(analysis_provider="openai_compatible", openai_compatible_api_key="k")
        with pytest.raises(ValueError, match="openai_compatible_base_url"):
            AnalyzerFactory.create(settings)

    def test_unknown_provider_raises(self) -> None:
        with pytest.raises(ValueError, match="Unknown analysis provider 'acme'"):
            AnalyzerFactory.create(Settings(analysis_provider="acme"))

    def test_provider_is_case_insensitive(self) -> None:
        settings = Settings(analysis_provider="Example")
        assert isinstance(AnalyzerFactory.create(settings), Analyzer)

    def test_missing_key_defers_error_to_analysis(self) -> None:
        settings = Settings(analysis_provider="openrouter", openrouter_api_key="")
        analyzer = AnalyzerFactory.create(settings)
        with pytest.raises(AnalysisConfigurationError):
            analyzer.analyze("transcript")
