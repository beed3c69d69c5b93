from dataclasses import dataclass, field

SENTIMENTS = ("optimistic", "cautious", "neutral", "pessimistic")
# Reserved for fallback_result(); never accepted from a model.
ERROR_SENTIMENT = "error"
CONFIDENCE_LEVELS = ("high", "medium", "low")
SPEAKERS = ("CEO", "CFO", "Other")
SEVERITIES = ("high", "medium", "low")
TIMEFRAMES = ("near-term", "long-term", "ongoing")


@dataclass(frozen=True)
class ManagementTone:
    """Overall sentiment of management, backed by direct quotes."""

    sentiment: str
    confidence: str
    supporting_quotes: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class KeyPositive:
    topic: str
    description: str
    mentioned_by: str | None = None


@dataclass(frozen=True)
class KeyConcern:
    topic: str
    description: str
    severity: str


@dataclass(frozen=True)
class ForwardGuidance:
    """Outlook statements; None where the transcript says nothing."""

    revenue_outlook: str | None = None
    margin_outlook: str | None = None
    capex_outlook: str | None = None
    confidence: str | None = None


@dataclass(frozen=True)
class GrowthInitiative:
    initiative: str
    description: str
    timeframe: str


@dataclass(frozen=True)
class AnalysisResult:
    """Structured financial-sentiment analysis of an earnings call."""

    management_tone: ManagementTone
    summary: str
    key_positives: list[KeyPositive] = field(default_factory=list)
    key_concerns: list[KeyConcern] = field(default_factory=list)
    forward_guidance: ForwardGuidance = field(default_factory=ForwardGuidance)
    capacity_utilization: str | None = None
    growth_initiatives: list[GrowthInitiative] = field(default_factory=list)

    @property
    def is_error(self) -> bool:
        return self.management_tone.sentiment == ERROR_SENTIMENT


def fallback_result() -> AnalysisResult:
    """Result returned when every candidate model failed."""
    return AnalysisResult(
        management_tone=ManagementTone(sentiment=ERROR_SENTIMENT, confidence="low"),
        key_concerns=[
            KeyConcern(
                topic="Analysis Error",
                description="All AI models failed. Please try again later.",
                severity="high",
            )
        ],
        summary="Analysis could not be completed due to AI service errors.",
    )
