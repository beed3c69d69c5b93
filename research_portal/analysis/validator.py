"""Validates parsed model output against the analysis schema and builds the result.

Omissions a model commonly makes are repaired: missing lists become empty,
missing nullable strings become None and a missing forward_guidance object
becomes all-null. Wrong types and values outside the allowed enums are
violations.
"""

from typing import Any

from research_portal.analysis.exceptions import AnalysisValidationError
from research_portal.analysis.models import (
    CONFIDENCE_LEVELS,
    ERROR_SENTIMENT,
    SENTIMENTS,
    SEVERITIES,
    SPEAKERS,
    TIMEFRAMES,
    AnalysisResult,
    ForwardGuidance,
    GrowthInitiative,
    KeyConcern,
    KeyPositive,
    ManagementTone,
)


def validate_and_build(
    data: dict[str, Any], *, allow_error_sentiment: bool = False
) -> AnalysisResult:
    """Validate raw parsed JSON and build an AnalysisResult.

    Args:
        data: Parsed JSON object.
        allow_error_sentiment: Accept the "error" sentiment of the fallback
            result. Only set when rebuilding a stored result.

    Raises:
        AnalysisValidationError: on any schema violation.
    """
    if not isinstance(data, dict):
        raise AnalysisValidationError("Analysis result must be an object")
    if "management_tone" not in data:
        raise AnalysisValidationError("Missing required top-level field: management_tone")
    summary = data.get("summary")
    if not isinstance(summary, str):
        raise AnalysisValidationError("'summary' must be a string")

    return AnalysisResult(
        management_tone=_build_management_tone(
            data["management_tone"], allow_error_sentiment
        ),
        summary=summary,
        key_positives=_build_list(data.get("key_positives"), "key_positives", _build_positive),
        key_concerns=_build_list(data.get("key_concerns"), "key_concerns", _build_concern),
        forward_guidance=_build_forward_guidance(data.get("forward_guidance")),
        capacity_utilization=_optional_str(
            data.get("capacity_utilization"), "capacity_utilization"
        ),
        growth_initiatives=_build_list(
            data.get("growth_initiatives"), "growth_initiatives", _build_initiative
        ),
    )


def _build_management_tone(raw: Any, allow_error_sentiment: bool) -> ManagementTone:
    if not isinstance(raw, dict):
        raise AnalysisValidationError("'management_tone' must be an object")
    sentiments = SENTIMENTS + (ERROR_SENTIMENT,) if allow_error_sentiment else SENTIMENTS
    sentiment = _enum(raw.get("sentiment"), sentiments, "management_tone.sentiment")
    confidence = _enum(raw.get("confidence"), CONFIDENCE_LEVELS, "management_tone.confidence")
    quotes = raw.get("supporting_quotes")
    if quotes is None:
        quotes = []
    if not isinstance(quotes, list) or not all(isinstance(q, str) for q in quotes):
        raise AnalysisValidationError(
            "'management_tone.supporting_quotes' must be a list of strings"
        )
    return ManagementTone(sentiment=sentiment, confidence=confidence, supporting_quotes=quotes)


def _build_list(raw: Any, name: str, build: Any) -> list[Any]:
    if raw is None:
        return []
    if not isinstance(raw, list):
        raise AnalysisValidationError(f"'{name}' must be a list")
    items = []
    for index, item in enumerate(raw):
        if not isinstance(item, dict):
            raise AnalysisValidationError(f"'{name}' item at index {index} must be an object")
        items.append(build(item, f"{name}[{index}]"))
    return items


def _build_positive(raw: dict[str, Any], path: str) -> KeyPositive:
    mentioned_by = raw.get("mentioned_by")
    if mentioned_by is not None:
        mentioned_by = _enum(mentioned_by, SPEAKERS, f"{path}.mentioned_by")
    return KeyPositive(
        topic=_required_str(raw.get("topic"), f"{path}.topic"),
        description=_required_str(raw.get("description"), f"{path}.description"),
        mentioned_by=mentioned_by,
    )


def _build_concern(raw: dict[str, Any], path: str) -> KeyConcern:
    return KeyConcern(
        topic=_required_str(raw.get("topic"), f"{path}.topic"),
        description=_required_str(raw.get("description"), f"{path}.description"),
        severity=_enum(raw.get("severity"), SEVERITIES, f"{path}.severity"),
    )


def _build_initiative(raw: dict[str, Any], path: str) -> GrowthInitiative:
    return GrowthInitiative(
        initiative=_required_str(raw.get("initiative"), f"{path}.initiative"),
        description=_required_str(raw.get("description"), f"{path}.description"),
        timeframe=_enum(raw.get("timeframe"), TIMEFRAMES, f"{path}.timeframe"),
    )


def _build_forward_guidance(raw: Any) -> ForwardGuidance:
    if raw is None:
        return ForwardGuidance()
    if not isinstance(raw, dict):
        raise AnalysisValidationError("'forward_guidance' must be an object")
    confidence = raw.get("confidence")
    if confidence is not None:
        confidence = _enum(confidence, CONFIDENCE_LEVELS, "forward_guidance.confidence")
    return ForwardGuidance(
        revenue_outlook=_optional_str(raw.get("revenue_outlook"), "forward_guidance.revenue_outlook"),
        margin_outlook=_optional_str(raw.get("margin_outlook"), "forward_guidance.margin_outlook"),
        capex_outlook=_optional_str(raw.get("capex_outlook"), "forward_guidance.capex_outlook"),
        confidence=confidence,
    )


def _enum(raw: Any, allowed: tuple[str, ...], path: str) -> str:
    if raw not in allowed:
        raise AnalysisValidationError(
            f"'{path}' must be one of {list(allowed)}, got {raw!r}"
        )
    return raw


def _required_str(raw: Any, path: str) -> str:
    if not isinstance(raw, str):
        raise AnalysisValidationError(f"'{path}' must be a string")
    return raw


def _optional_str(raw: Any, path: str) -> str | None:
    if raw is not None and not isinstance(raw, str):
        raise AnalysisValidationError(f"'{path}' must be a string or null")
    return raw
