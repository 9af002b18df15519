"""Providers for brew-taste."""

from brew_taste.providers.base import BaseProvider
from brew_taste.providers.gemini import GeminiProvider

__all__ = ["BaseProvider", "GeminiProvider"]
