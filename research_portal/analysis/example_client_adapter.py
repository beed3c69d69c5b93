"""Offline analysis client for local development and tests.

Select it with ANALYSIS_PROVIDER=example; no API key or network access needed.
"""

import json
from typing import ClassVar

from research_portal.analysis.client_base import BaseAnalysisClient


class ExampleClientAdapter(BaseAnalysisClient):
    """Returns a fixed, schema-valid analysis wrapped in a code fence."""

    DEFAULT_RESPONSE: ClassVar[dict[str, object]] = {
        "management_tone": {
            "sentiment": "neutral",
            "confidence": "low",
            "supporting_quotes": [],
        },
        "key_positives": [],
        "key_concerns": [],
        "forward_guidance": {
            "revenue_outlook": None,
            "margin_outlook": None,
            "capex_outlook": None,
            "confidence": "low",
        },
        "capacity_utilization": None,
        "growth_initiatives": [],
        "summary": "Example analysis generated without calling an AI provider.",
    }

    def create_chat_completion(
        self,
        *,
        model: str,
        temperature: float,
        max_tokens: int,
        system_prompt: str,
        user_prompt: str,
    ) -> str:
        _ = model, temperature, max_tokens, system_prompt, user_prompt
        return "```json\n" + json.dumps(self.DEFAULT_RESPONSE, indent=2) + "\n```"
