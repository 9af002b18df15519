"""Gemini provider implementation."""

from google import genai
from google.genai import errors, types

from brew_taste.config import DEFAULT_MODEL, DEFAULT_TIMEOUT_SEC
from brew_taste.exceptions import ModelUnavailableError
from brew_taste.providers.base import BaseProvider


class GeminiProvider(BaseProvider):
    """Gemini text generation provider."""

    def __init__(
        self,
        api_key: str,
        model: str = DEFAULT_MODEL,
        timeout_sec: float = DEFAULT_TIMEOUT_SEC,
        client=None,
    ):
        """Initialize Gemini provider.

        Args:
            api_key: Gemini API key.
            model: Model name to use.
            timeout_sec: Upper bound on a single request, in seconds.
            client: Preconfigured client, mainly for tests.

        Raises:
            ModelUnavailableError: If no API key is provided.
        """
        if not api_key:
            raise ModelUnavailableError("No API key provided.")
        self.model = model
        self.client = client or genai.Client(
            api_key=api_key,
            http_options=types.HttpOptions(timeout=int(timeout_sec * 1000)),
        )

    def generate(self, prompt: str) -> str:
        """Generate the taste analysis text for a prompt.

        Raises:
            ModelUnavailableError: On HTTP errors, transport failures or timeouts
        """
        try:
            response = self.client.models.generate_content(
                model=self.model,
                contents=prompt,
            )
        except errors.APIError as e:
            raise ModelUnavailableError(f"Gemini API error ({e.code}): {e.message}") from e
        except Exception as e:
            raise ModelUnavailableError(f"Gemini request failed: {e}") from e

        return _first_part_text(response)


def _first_part_text(response) -> str:
    """Return the text of the first part of the first candidate, or ''."""
    candidates = getattr(response, "candidates", None) or []
    if not candidates:
        return ""
    content = getattr(candidates[0], "content", None)
    parts = getattr(content, "parts", None) or []
    if not parts:
        return ""
    return getattr(parts[0], "text", None) or ""
