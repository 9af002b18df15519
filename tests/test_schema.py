"""Tests for schema models."""

import pydantic
import pytest

from brew_taste import AnalysisResult, AnalyzeResponse, BrewingInput


def _analysis_payload() -> dict:
    return {
        "tasteProfile": {"acidity": 80, "sweetness": 62, "bitterness": 38, "body": 55, "balance": 70},
        "overallScore": 81,
        "comment": "Bright and clean.",
        "recommendations": {
            "waterTemp": "94°C",
            "grindAdjustment": "Go one click finer",
            "brewTime": "3:30 min",
        },
    }


def test_brewing_input_accepts_camel_case():
    info = BrewingInput.model_validate(
        {"beanName": "Kenya AA", "roastLevel": 2, "grinderModel": "1Zpresso K-Ultra", "grindSize": 800, "grindUnit": "microns"}
    )
    assert info.bean_name == "Kenya AA"
    assert info.grinder_model == "1Zpresso K-Ultra"
    assert info.grind_setting == "800 microns"


def test_brewing_input_defaults_to_clicks():
    info = BrewingInput(bean_name="Kenya AA", roast_level=2, grinder_model="C40", grind_size=22.5)
    assert info.grind_unit == "clicks"
    assert info.grind_setting == "22.5 clicks"


def test_brewing_input_is_frozen(brewing):
    with pytest.raises(pydantic.ValidationError):
        brewing.roast_level = 3


def test_analysis_result_serializes_by_alias():
    result = AnalysisResult.model_validate(_analysis_payload())
    dumped = result.model_dump(by_alias=True)
    assert dumped == _analysis_payload()


def test_analysis_result_rejects_out_of_range_attribute():
    payload = _analysis_payload()
    payload["tasteProfile"]["body"] = 120
    with pytest.raises(pydantic.ValidationError):
        AnalysisResult.model_validate(payload)


def test_envelope_omits_absent_fields():
    assert AnalyzeResponse(success=False, error="Missing required fields").to_payload() == {
        "success": False,
        "error": "Missing required fields",
    }
    payload = AnalyzeResponse(success=True, data=AnalysisResult.model_validate(_analysis_payload())).to_payload()
    assert "error" not in payload
    assert payload["data"]["overallScore"] == 81


@pytest.mark.parametrize(
    "grind_size,expected",
    [(20, "20 clicks"), (20.0, "20 clicks"), (20.1234567, "20.1234567 clicks"), (1000000, "1000000 clicks")],
)
def test_grind_setting_keeps_value_verbatim(grind_size, expected):
    info = BrewingInput(bean_name="Kenya AA", roast_level=2, grinder_model="C40", grind_size=grind_size)
    assert info.grind_setting == expected


@pytest.mark.parametrize("grind_size", [float("inf"), float("nan")])
def test_brewing_input_rejects_non_finite_grind_size(grind_size):
    with pytest.raises(pydantic.ValidationError):
        BrewingInput(bean_name="Kenya AA", roast_level=2, grinder_model="C40", grind_size=grind_size)
