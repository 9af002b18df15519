"""Core analysis functions."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from brew_taste.config import Settings
from brew_taste.estimator import RandomSource, estimate
from brew_taste.exceptions import ModelUnavailableError, UnparsableResponseError, ValidationError
from brew_taste.normalizer import normalize_response
from brew_taste.prompt import build_prompt
from brew_taste.providers.base import BaseProvider
from brew_taste.schema import AnalysisResult, AnalyzeResponse, BrewingInput
from brew_taste.validation import decode_body, validate_request

logger = logging.getLogger(__name__)

RequestBody = bytes | str | Mapping[str, Any]


def _build_gemini_provider(api_key: str, settings: Settings) -> BaseProvider:
    from brew_taste.providers.gemini import GeminiProvider

    return GeminiProvider(api_key=api_key, model=settings.model, timeout_sec=settings.timeout_sec)


def invoke(prompt: str, credential: str | None, *, settings: Settings | None = None) -> str:
    """Send a prompt to the taste model and return its raw text.

    Raises:
        ModelUnavailableError: If no credential is configured or the call fails.
    """
    if not credential:
        raise ModelUnavailableError("GEMINI_API_KEY is not set")
    provider = _build_gemini_provider(credential, settings or Settings())
    return provider.generate(prompt)


def analyze_with_metadata(
    brewing: BrewingInput,
    *,
    api_key: str | None = None,
    settings: Settings | None = None,
    rng: RandomSource | None = None,
) -> tuple[AnalysisResult, dict[str, str]]:
    """Analyze brewing parameters and report which path produced the result."""
    settings = settings or Settings.from_env()
    credential = api_key or settings.gemini_api_key

    if not credential:
        logger.info("GEMINI_API_KEY is not set, using heuristic estimate")
        return estimate(brewing, rng=rng), {"source": "heuristic", "fallback_reason": "no_credential"}

    try:
        raw = invoke(build_prompt(brewing), credential, settings=settings)
        return normalize_response(raw), {"source": "gemini"}
    except ModelUnavailableError as exc:
        logger.warning("taste model unavailable, using heuristic estimate: %s", exc)
        reason = "unavailable"
    except UnparsableResponseError:
        logger.warning("taste model response unparsable, using heuristic estimate")
        reason = "unparsable"

    return estimate(brewing, rng=rng), {"source": "heuristic", "fallback_reason": reason}


def analyze(
    brewing: BrewingInput,
    *,
    api_key: str | None = None,
    settings: Settings | None = None,
    rng: RandomSource | None = None,
) -> AnalysisResult:
    """Predict the taste profile for a brewing setup.

    Args:
        brewing: Validated brewing parameters.
        api_key: Gemini API key. Falls back to GEMINI_API_KEY env var.
        settings: Runtime settings. Defaults to `Settings.from_env()`.
        rng: Random source for the heuristic estimate.

    Returns:
        AnalysisResult from the model, or from the heuristic estimate when
        the model is not configured, unreachable or returns unusable text.
    """
    result, _ = analyze_with_metadata(brewing, api_key=api_key, settings=settings, rng=rng)
    return result


def handle(
    body: RequestBody,
    *,
    settings: Settings | None = None,
    rng: RandomSource | None = None,
) -> tuple[int, AnalyzeResponse]:
    """Run one analysis request and return `(status_code, envelope)`."""
    try:
        brewing = validate_request(decode_body(body))
        result = analyze(brewing, settings=settings, rng=rng)
        return 200, AnalyzeResponse(success=True, data=result)
    except ValidationError as exc:
        return 400, AnalyzeResponse(success=False, error=str(exc))
    except Exception as exc:
        logger.exception("analyze failed")
        return 500, AnalyzeResponse(success=False, error=str(exc) or "Unknown error occurred")
