"""Custom exceptions for brew-taste."""


class BrewTasteError(Exception):
    """Base exception for brew-taste."""

    pass


class ValidationError(BrewTasteError):
    """Raised when the request is missing required fields or is malformed."""

    pass


class ModelUnavailableError(BrewTasteError):
    """Raised when the taste model cannot be reached or is not configured."""

    pass


class UnparsableResponseError(BrewTasteError):
    """Raised when the taste model returns text that is not a valid analysis."""

    pass
