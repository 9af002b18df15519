"""Parsing of raw model output into an AnalysisResult."""

from __future__ import annotations

import logging
import re

import pydantic

from brew_taste.exceptions import UnparsableResponseError
from brew_taste.schema import AnalysisResult

logger = logging.getLogger(__name__)

_CODE_FENCE = re.compile(r"```(?:json)?\n?|\n?```", re.IGNORECASE)


def strip_code_fences(raw: str) -> str:
    """Remove markdown code fence markers and surrounding whitespace."""
    return _CODE_FENCE.sub("", raw).strip()


def normalize_response(raw: str) -> AnalysisResult:
    """Parse raw model text into an AnalysisResult.

    Raises:
        UnparsableResponseError: If the text is not valid JSON or does not
            carry every field of the result.
    """
    cleaned = strip_code_fences(raw or "")
    if not cleaned:
        raise UnparsableResponseError("Model returned an empty response")
    try:
        return AnalysisResult.model_validate_json(cleaned)
    except pydantic.ValidationError as exc:
        logger.warning("failed to parse model response: %.500s", raw)
        raise UnparsableResponseError(f"Model response does not match the result schema: {exc}") from exc
