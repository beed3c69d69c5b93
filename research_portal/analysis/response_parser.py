"""Recovers the JSON object from free-form model output.

Models wrap their answer in code fences or prose despite being told not to.
The first balanced ``{...}`` span that parses as a JSON object wins.
"""

import json
from collections.abc import Iterator
from typing import Any

from research_portal.analysis.exceptions import AnalysisResponseError


def parse_json_object(raw: str) -> dict[str, Any]:
    """Return the first JSON object found in *raw*.

    Raises:
        AnalysisResponseError: if no JSON object can be recovered.
    """
    cleaned = _strip_code_fences(raw.strip())
    if not cleaned:
        raise AnalysisResponseError("Response was empty")

    try:
        parsed = json.loads(cleaned)
    except json.JSONDecodeError:
        parsed = None
    if isinstance(parsed, dict):
        return parsed

    for candidate in _balanced_objects(cleaned):
        try:
            parsed = json.loads(candidate)
        except json.JSONDecodeError:
            continue
        if isinstance(parsed, dict):
            return parsed

    raise AnalysisResponseError("Response did not contain valid JSON")


def _strip_code_fences(text: str) -> str:
    if not text.startswith("```"):
        return text
    lines = text.splitlines()
    if lines and lines[0].startswith("```"):
        lines = lines[1:]
    if lines and lines[-1].strip() == "```":
        lines = lines[:-1]
    return "\n".join(lines)


def _balanced_objects(text: str) -> Iterator[str]:
    """Yield every balanced ``{...}`` span, in order of its opening brace."""
    start = text.find("{")
    while start != -1:
        end = _matching_brace(text, start)
        if end != -1:
            yield text[start : end + 1]
        start = text.find("{", start + 1)


def _matching_brace(text: str, start: int) -> int:
    depth = 0
    in_string = False
    escaped = False
    for index in range(start, len(text)):
        char = text[index]
        if in_string:
            if escaped:
                escaped = False
            elif char == "\\":
                escaped = True
            elif char == '"':
                in_string = False
        elif char == '"':
            in_string = True
        elif char == "{":
            depth += 1
        elif char == "}":
            depth -= 1
            if depth == 0:
                return index
    return -1
