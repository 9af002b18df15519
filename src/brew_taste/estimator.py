"""Heuristic taste estimate used when the model path yields nothing usable."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass
from typing import Protocol

from brew_taste.schema import AnalysisResult, BrewingInput, Recommendations, TasteProfile

PROFILE_MIN = 20
PROFILE_MAX = 95
JITTER = 5.0


class RandomSource(Protocol):
    def uniform(self, a: float, b: float) -> float: ...


@dataclass(frozen=True)
class _Bucket:
    comment: str
    water_temp: str
    grind_adjustment: str
    brew_time: str


_BUCKETS: dict[str, _Bucket] = {
    "dark": _Bucket(
        comment=(
            "Your {bean} with dark roast profile shows prominent bitterness and body. "
            "The current grind setting at {grind} on your {grinder} may lead to over-extraction. "
            "Consider adjusting your parameters for better balance."
        ),
        water_temp="88-92°C (lower range)",
        grind_adjustment="Increase grind size by 2-3 clicks",
        brew_time="Reduce to 2:30-3:00 min",
    ),
    "light": _Bucket(
        comment=(
            "The light roast profile of {bean} brings bright acidity and delicate sweetness. "
            "Your current {grinder} setting of {grind} should preserve the nuanced flavors well. "
            "This is approaching an optimal extraction window."
        ),
        water_temp="93-96°C (higher range)",
        grind_adjustment="Decrease grind size by 1-2 clicks",
        brew_time="Extend to 3:30-4:00 min",
    ),
    "medium": _Bucket(
        comment=(
            "Your {bean} at medium roast offers excellent balance potential. "
            "The grind setting of {grind} on your {grinder} is in a good range. "
            "Fine-tune extraction for peak flavor."
        ),
        water_temp="90-94°C (medium range)",
        grind_adjustment="Current setting is optimal",
        brew_time="3:00-3:30 min",
    ),
}


def roast_bucket(roast_level: int) -> str:
    """Map a 0-4 roast level onto the `light`, `medium` or `dark` bucket."""
    if roast_level >= 3:
        return "dark"
    if roast_level <= 1:
        return "light"
    return "medium"


def _clamp(value: float) -> float:
    return max(PROFILE_MIN, min(PROFILE_MAX, value))


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def estimate(brewing: BrewingInput, *, rng: RandomSource | None = None) -> AnalysisResult:
    """Estimate a taste profile from roast level with a little jitter.

    Args:
        brewing: Validated brewing parameters.
        rng: Source of the jitter; anything with `uniform(a, b)`.
            Defaults to the module-level `random` generator.

    Returns:
        A fully populated AnalysisResult. Profile attributes are always
        within [20, 95]; overall score is not clamped.
    """
    rng = rng or random
    r = brewing.roast_level

    def jitter(base: float) -> float:
        return _clamp(base + rng.uniform(-JITTER, JITTER))

    acidity = jitter(85 - 10 * r)
    sweetness = jitter(60 + 5 * r)
    bitterness = jitter(40 + 12 * r)
    body = jitter(50 + 8 * r)
    balance = _clamp((acidity + sweetness + (100 - bitterness) + body) / 4)

    overall_score = _round_half_up((acidity + sweetness + body + balance - 0.5 * bitterness) / 4)

    bucket = _BUCKETS[roast_bucket(r)]
    comment = bucket.comment.format(
        bean=brewing.bean_name,
        grind=brewing.grind_setting,
        grinder=brewing.grinder_model,
    )

    return AnalysisResult(
        taste_profile=TasteProfile(
            acidity=_round_half_up(acidity),
            sweetness=_round_half_up(sweetness),
            bitterness=_round_half_up(bitterness),
            body=_round_half_up(body),
            balance=_round_half_up(balance),
        ),
        overall_score=overall_score,
        comment=comment,
        recommendations=Recommendations(
            water_temp=bucket.water_temp,
            grind_adjustment=bucket.grind_adjustment,
            brew_time=bucket.brew_time,
        ),
    )
