from abc import ABC, abstractmethod

from research_portal.analysis.models import AnalysisResult


class BaseAnalyzer(ABC):
    """Contract for transcript analyzers."""

    @abstractmethod
    def analyze(self, transcript: str) -> AnalysisResult:
        """Produce a structured sentiment analysis of an earnings call transcript.

        Args:
            transcript: Normalized transcript text.

        Returns:
            AnalysisResult. Upstream failures degrade to the error-shaped
            fallback result instead of raising.

        Raises:
            AnalysisConfigurationError: if no provider credential is available.
            AnalysisInputError: if the transcript is empty.
        """
