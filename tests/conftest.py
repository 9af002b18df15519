import pytest

from brew_taste.schema import BrewingInput


class FixedRandom:
    """Random source that always returns the same offset."""

    def __init__(self, value: float):
        self.value = value
        self.calls: list[tuple[float, float]] = []

    def uniform(self, a: float, b: float) -> float:
        self.calls.append((a, b))
        return self.value


@pytest.fixture
def fixed_random():
    return FixedRandom


@pytest.fixture
def brewing() -> BrewingInput:
    return BrewingInput(
        bean_name="Ethiopian Yirgacheffe",
        roast_level=0,
        grinder_model="Comandante C40",
        grind_size=20,
        grind_unit="clicks",
    )


@pytest.fixture(autouse=True)
def _no_api_key(monkeypatch):
    monkeypatch.delenv("GEMINI_API_KEY", raising=False)
