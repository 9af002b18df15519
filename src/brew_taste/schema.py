"""Data models for brew-taste."""

from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

GrindUnit = Literal["clicks", "microns"]
# Heuristic estimates are whole numbers; model replies may carry fractions.
Attribute = Annotated[int, Field(ge=0, le=100)] | Annotated[float, Field(ge=0, le=100)]


def _format_number(value: float) -> str:
    return str(int(value)) if value.is_integer() else repr(value)


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class BrewingInput(_CamelModel):
    """Brewing parameters supplied by the caller."""

    model_config = ConfigDict(frozen=True)

    bean_name: str = Field(min_length=1)
    roast_level: int = Field(ge=0, le=4)
    grinder_model: str = Field(min_length=1)
    grind_size: float = Field(gt=0, allow_inf_nan=False)
    grind_unit: GrindUnit = "clicks"

    @property
    def grind_setting(self) -> str:
        """Grind size and unit as a display string, e.g. `20 clicks`."""
        return f"{_format_number(self.grind_size)} {self.grind_unit}"


class TasteProfile(_CamelModel):
    """Predicted flavor attributes."""

    acidity: Attribute
    sweetness: Attribute
    bitterness: Attribute
    body: Attribute
    balance: Attribute


class Recommendations(_CamelModel):
    """Human-readable brewing guidance."""

    water_temp: str
    grind_adjustment: str
    brew_time: str


class AnalysisResult(_CamelModel):
    """Full taste prediction for one request."""

    taste_profile: TasteProfile
    overall_score: int
    comment: str
    recommendations: Recommendations


class AnalyzeResponse(_CamelModel):
    """Response envelope returned to the presentation layer."""

    success: bool
    data: AnalysisResult | None = None
    error: str | None = None

    def to_payload(self) -> dict:
        return self.model_dump(by_alias=True, exclude_none=True)
