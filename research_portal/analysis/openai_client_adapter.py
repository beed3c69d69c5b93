from typing import Any

import httpx
import openai

from research_portal.analysis.client_base import BaseAnalysisClient
from research_portal.analysis.exceptions import (
    AnalysisConfigurationError,
    AnalysisNetworkError,
    AnalysisResponseError,
)


class OpenAIClientAdapter(BaseAnalysisClient):
    """Analysis client built on the OpenAI-compatible chat completions API.

    SDK retries are disabled: a rate-limited or failing model is abandoned
    at once so the analyzer can move on to the next one.
    """

    def __init__(
        self,
        *,
        api_key: str,
        timeout_seconds: int,
        base_url: str | None = None,
        default_headers: dict[str, str] | None = None,
        http_client: httpx.Client | None = None,
    ) -> None:
        self._client: openai.OpenAI | None = None
        if api_key:
            self._client = openai.OpenAI(
                api_key=api_key,
                timeout=timeout_seconds,
                base_url=base_url,
                max_retries=0,
                default_headers=default_headers,
                http_client=http_client,
            )

    @property
    def is_configured(self) -> bool:
        return self._client is not None

    def create_chat_completion(
        self,
        *,
        model: str,
        temperature: float,
        max_tokens: int,
        system_prompt: str,
        user_prompt: str,
    ) -> str:
        if self._client is None:
            raise AnalysisConfigurationError("AI provider API key is missing")
        try:
            response = self._client.chat.completions.create(
                model=model,
                temperature=temperature,
                max_tokens=max_tokens,
                messages=[
                    {"role": "system", "content": system_prompt},
                    {"role": "user", "content": user_prompt},
                ],
            )
        except (openai.APIConnectionError, httpx.ConnectError, httpx.TimeoutException) as exc:
            raise AnalysisNetworkError(f"AI provider network error: {exc}") from exc
        except openai.APIError as exc:
            raise AnalysisNetworkError(f"AI provider API error: {exc}") from exc
        except openai.OpenAIError as exc:
            raise AnalysisResponseError(f"AI provider client error: {exc}") from exc

        return self._extract_content(response)

    @staticmethod
    def _extract_content(response: Any) -> str:
        # Gateways answering 200 with a non-JSON body come back from the SDK as plain text.
        if isinstance(response, (str, bytes)):
            raise AnalysisResponseError("AI returned a non-JSON response body")

        choices = getattr(response, "choices", None)
        if not choices:
            raise AnalysisResponseError("AI returned no choices")
        try:
            content = choices[0].message.content
        except (AttributeError, IndexError, KeyError, TypeError) as exc:
            raise AnalysisResponseError(f"AI returned a malformed response: {exc}") from exc
        if not isinstance(content, str) or not content:
            raise AnalysisResponseError("AI returned empty response")
        return content
