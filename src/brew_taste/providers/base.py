"""Base provider interface."""

from abc import ABC, abstractmethod


class BaseProvider(ABC):
    """Abstract base class for text generation providers."""

    @abstractmethod
    def generate(self, prompt: str) -> str:
        """Send a prompt and return the raw response text.

        Args:
            prompt: Fully rendered prompt text

        Returns:
            Raw text of the first candidate, or an empty string

        Raises:
            ModelUnavailableError: If the remote call fails for any reason
        """
        pass
