"""Earnings-call analysis with ordered model fallback."""

from pathlib import Path

from research_portal.analysis.base import BaseAnalyzer
from research_portal.analysis.client_base import BaseAnalysisClient
from research_portal.analysis.exceptions import (
    AnalysisConfigurationError,
    AnalysisError,
    AnalysisInputError,
)
from research_portal.analysis.models import AnalysisResult, fallback_result
from research_portal.analysis.prompt_loader import load_json_schema, load_prompt_template
from research_portal.analysis.response_parser import parse_json_object
from research_portal.analysis.validator import validate_and_build
from research_portal.logging.logger import Log

DEFAULT_SYSTEM_PROMPT = "You extract only explicit facts, never hallucinate."
TRUNCATION_MARKER = "\n[Transcript truncated]"


class Analyzer(BaseAnalyzer):
    """Analyzes transcripts by trying each configured model in order.

    The first model whose response yields a schema-valid JSON object wins.
    Models are tried one at a time, never concurrently.
    """

    def __init__(
        self,
        *,
        client: BaseAnalysisClient,
        models: list[str],
        temperature: float = 0.1,
        max_tokens: int = 8192,
        max_transcript_chars: int = 100_000,
        prompt_template_path: Path | None = None,
        json_schema_path: Path | None = None,
        system_prompt: str = DEFAULT_SYSTEM_PROMPT,
    ) -> None:
        self._client = client
        self._models = list(models)
        self._temperature = max(0.0, min(0.2, temperature))
        self._max_tokens = max_tokens
        self._max_transcript_chars = max_transcript_chars
        self._system_prompt = system_prompt
        self._prompt_template = load_prompt_template(prompt_template_path)
        self._json_schema = load_json_schema(json_schema_path)

    def analyze(self, transcript: str) -> AnalysisResult:
        if not self._client.is_configured:
            raise AnalysisConfigurationError("AI provider API key is missing")
        if not transcript or not transcript.strip():
            raise AnalysisInputError("Transcript is empty or missing.")

        prompt = self._build_prompt(self._truncate(transcript))
        Log.debug(f"Analysis prompt:\n{prompt}")

        for model in self._models:
            Log.info(f"Trying model {model}")
            try:
                result = self._analyze_with(model, prompt)
            except AnalysisConfigurationError:
                raise
            except AnalysisError as exc:
                Log.warning(f"Model {model} failed: {exc}")
                continue
            Log.info(f"Analysis succeeded with model {model}")
            return result

        Log.error(f"All {len(self._models)} models failed, returning fallback result")
        return fallback_result()

    def _truncate(self, transcript: str) -> str:
        if len(transcript) <= self._max_transcript_chars:
            return transcript
        Log.warning(
            f"Transcript truncated from {len(transcript)} to {self._max_transcript_chars} chars"
        )
        return transcript[: self._max_transcript_chars] + TRUNCATION_MARKER

    def _build_prompt(self, transcript: str) -> str:
        return self._prompt_template.format(
            json_schema=self._json_schema,
            transcript=transcript,
        )

    def _analyze_with(self, model: str, prompt: str) -> AnalysisResult:
        raw_response = self._client.create_chat_completion(
            model=model,
            temperature=self._temperature,
            max_tokens=self._max_tokens,
            system_prompt=self._system_prompt,
            user_prompt=prompt,
        )
        Log.debug(f"Raw response from {model}:\n{raw_response}")
        return validate_and_build(parse_json_object(raw_response))
