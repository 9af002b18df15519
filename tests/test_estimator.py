"""Tests for the heuristic taste estimate."""

import random

import pytest

from brew_taste.estimator import estimate, roast_bucket
from brew_taste.schema import BrewingInput


def _brewing(roast_level: int, **overrides) -> BrewingInput:
    fields = {
        "bean_name": "Guatemala Huehuetenango",
        "roast_level": roast_level,
        "grinder_model": "Baratza Encore",
        "grind_size": 18,
        "grind_unit": "clicks",
    }
    fields.update(overrides)
    return BrewingInput(**fields)


@pytest.mark.parametrize("roast_level", range(5))
@pytest.mark.parametrize("seed", range(25))
def test_profile_always_within_bounds(roast_level, seed):
    result = estimate(_brewing(roast_level), rng=random.Random(seed))

    for value in result.taste_profile.model_dump().values():
        assert 20 <= value <= 95
        assert isinstance(value, int)
    assert isinstance(result.overall_score, int)


def test_base_values_without_jitter(fixed_random):
    rng = fixed_random(0.0)

    result = estimate(_brewing(0), rng=rng)

    profile = result.taste_profile
    assert (profile.acidity, profile.sweetness, profile.bitterness, profile.body) == (85, 60, 40, 50)
    assert profile.balance == 64
    assert result.overall_score == 60
    assert rng.calls == [(-5.0, 5.0)] * 4


def test_dark_roast_base_values(fixed_random):
    result = estimate(_brewing(4), rng=fixed_random(0.0))

    profile = result.taste_profile
    assert (profile.acidity, profile.sweetness, profile.bitterness, profile.body) == (45, 80, 88, 82)
    assert profile.balance == 55
    assert result.overall_score == 54


def test_attributes_clamped_to_upper_bound(fixed_random):
    result = estimate(_brewing(4), rng=fixed_random(50.0))

    profile = result.taste_profile
    assert (profile.acidity, profile.sweetness, profile.bitterness, profile.body) == (95, 95, 95, 95)
    assert profile.balance == 73
    assert result.overall_score == 78


def test_overall_score_is_not_clamped(fixed_random):
    result = estimate(_brewing(2), rng=fixed_random(-100.0))

    profile = result.taste_profile
    assert (profile.acidity, profile.sweetness, profile.bitterness, profile.body) == (20, 20, 20, 20)
    assert profile.balance == 35
    # Below the 50-95 range the model is asked for.
    assert result.overall_score == 21


@pytest.mark.parametrize("roast_level", [3, 4])
def test_dark_bucket(roast_level):
    result = estimate(_brewing(roast_level))

    assert roast_bucket(roast_level) == "dark"
    assert result.recommendations.water_temp == "88-92°C (lower range)"
    assert result.recommendations.grind_adjustment == "Increase grind size by 2-3 clicks"
    assert result.recommendations.brew_time == "Reduce to 2:30-3:00 min"
    assert "dark roast" in result.comment


@pytest.mark.parametrize("roast_level", [0, 1])
def test_light_bucket(roast_level):
    result = estimate(_brewing(roast_level))

    assert roast_bucket(roast_level) == "light"
    assert result.recommendations.water_temp == "93-96°C (higher range)"
    assert result.recommendations.grind_adjustment == "Decrease grind size by 1-2 clicks"
    assert result.recommendations.brew_time == "Extend to 3:30-4:00 min"
    assert "light roast" in result.comment


def test_medium_bucket():
    result = estimate(_brewing(2))

    assert roast_bucket(2) == "medium"
    assert result.recommendations.water_temp == "90-94°C (medium range)"
    assert result.recommendations.grind_adjustment == "Current setting is optimal"
    assert result.recommendations.brew_time == "3:00-3:30 min"


@pytest.mark.parametrize("roast_level", range(5))
def test_comment_mentions_brewing_setup(roast_level):
    result = estimate(_brewing(roast_level, grind_size=650, grind_unit="microns"))

    assert "Guatemala Huehuetenango" in result.comment
    assert "Baratza Encore" in result.comment
    assert "650 microns" in result.comment
