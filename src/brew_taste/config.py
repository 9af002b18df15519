"""Runtime settings read from the process environment."""

from __future__ import annotations

import os
from dataclasses import dataclass, field

DEFAULT_MODEL = "gemini-2.5-flash"
DEFAULT_TIMEOUT_SEC = 5.0


def _safe_float(value: str | None, default: float) -> float:
    if value is None:
        return default
    try:
        return float(value)
    except ValueError:
        return default


def _split_csv(value: str | None, default: str) -> tuple[str, ...]:
    raw = value if value is not None else default
    return tuple(item.strip() for item in raw.split(",") if item.strip())


@dataclass(frozen=True)
class Settings:
    gemini_api_key: str | None = None
    model: str = DEFAULT_MODEL
    timeout_sec: float = DEFAULT_TIMEOUT_SEC
    allow_origins: tuple[str, ...] = field(default_factory=lambda: ("*",))

    @classmethod
    def from_env(cls) -> "Settings":
        timeout_sec = _safe_float(os.getenv("BREW_TASTE_TIMEOUT_SEC"), DEFAULT_TIMEOUT_SEC)
        if timeout_sec <= 0:
            timeout_sec = DEFAULT_TIMEOUT_SEC
        return cls(
            gemini_api_key=(os.getenv("GEMINI_API_KEY") or "").strip() or None,
            model=(os.getenv("BREW_TASTE_MODEL", DEFAULT_MODEL).strip() or DEFAULT_MODEL),
            timeout_sec=timeout_sec,
            allow_origins=_split_csv(os.getenv("FRONTEND_ORIGINS"), "*"),
        )
