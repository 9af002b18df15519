"""Request validation."""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any

import pydantic

from brew_taste.exceptions import ValidationError
from brew_taste.schema import BrewingInput

MISSING_FIELDS_MESSAGE = "Missing required fields"
INVALID_FIELDS_MESSAGE = "Invalid field values"
INVALID_JSON_MESSAGE = "Invalid JSON body"


def decode_body(raw: bytes | str | Mapping[str, Any]) -> Any:
    """Decode a raw request body into Python objects."""
    if isinstance(raw, Mapping):
        return raw
    try:
        return json.loads(raw)
    except (TypeError, ValueError) as exc:
        raise ValidationError(INVALID_JSON_MESSAGE) from exc


def _is_missing(body: Mapping[str, Any]) -> bool:
    # roastLevel 0 is a valid light roast, so only absence counts for it.
    return (
        not body.get("beanName")
        or body.get("roastLevel") is None
        or not body.get("grinderModel")
        or not body.get("grindSize")
    )


def validate_request(body: Any) -> BrewingInput:
    """Validate a decoded request body and build the brewing input.

    Raises:
        ValidationError: If a required field is absent or a value is malformed.
    """
    if not isinstance(body, Mapping) or _is_missing(body):
        raise ValidationError(MISSING_FIELDS_MESSAGE)
    if isinstance(body["roastLevel"], bool) or isinstance(body["grindSize"], bool):
        raise ValidationError(INVALID_FIELDS_MESSAGE)

    fields = {
        "beanName": body["beanName"],
        "roastLevel": body["roastLevel"],
        "grinderModel": body["grinderModel"],
        "grindSize": body["grindSize"],
    }
    if body.get("grindUnit") is not None:
        fields["grindUnit"] = body["grindUnit"]

    try:
        return BrewingInput.model_validate(fields)
    except pydantic.ValidationError as exc:
        raise ValidationError(INVALID_FIELDS_MESSAGE) from exc
