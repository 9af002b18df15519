"""brew-taste: Predict a coffee's taste profile from its brewing parameters."""

from brew_taste.core import analyze, handle
from brew_taste.estimator import estimate
from brew_taste.schema import AnalysisResult, AnalyzeResponse, BrewingInput, Recommendations, TasteProfile

__version__ = "0.1.0"

__all__ = [
    "analyze",
    "handle",
    "estimate",
    "AnalysisResult",
    "AnalyzeResponse",
    "BrewingInput",
    "Recommendations",
    "TasteProfile",
    "__version__",
]
