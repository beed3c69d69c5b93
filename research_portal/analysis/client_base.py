from abc import ABC, abstractmethod


class BaseAnalysisClient(ABC):
    """Contract for provider-specific chat completion clients."""

    @property
    def is_configured(self) -> bool:
        """False when the client has no credential to call its provider."""
        return True

    @abstractmethod
    def create_chat_completion(
        self,
        *,
        model: str,
        temperature: float,
        max_tokens: int,
        system_prompt: str,
        user_prompt: str,
    ) -> str:
        """Return the first choice's message content as plain text.

        Raises:
            AnalysisNetworkError: on transport or provider errors.
            AnalysisResponseError: on an empty response.
        """
