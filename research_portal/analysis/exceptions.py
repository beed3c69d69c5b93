class AnalysisError(Exception):
    """Raised when transcript analysis fails."""


class AnalysisConfigurationError(AnalysisError):
    """Raised when no provider credential is available. Never retried."""


class AnalysisInputError(AnalysisError):
    """Raised when the transcript is empty. Never retried."""


class AnalysisNetworkError(AnalysisError):
    """Raised when the AI provider call fails due to network/infrastructure issues."""


class AnalysisResponseError(AnalysisError):
    """Raised when a model returns an empty or unparsable response."""


class AnalysisValidationError(AnalysisResponseError):
    """Raised when the parsed response violates the analysis schema."""
