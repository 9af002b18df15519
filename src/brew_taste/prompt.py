"""Prompt rendering for the taste model."""

from brew_taste.schema import BrewingInput

ROAST_LEVEL_NAMES = ("Light", "Light-Medium", "Medium", "Medium-Dark", "Dark")

ANALYSIS_PROMPT = """You are a professional coffee expert and barista with deep knowledge of coffee extraction science, flavor profiles, and brewing parameters.

Analyze the following coffee brewing setup and provide a detailed taste prediction:

Coffee Bean: {bean_name}
Roast Level: {roast_name} ({roast_level}/4)
Grinder: {grinder_model}
Grind Size: {grind_setting}

Based on this information, predict the taste profile and provide brewing recommendations.

You MUST respond with ONLY a valid JSON object in this EXACT format (no markdown, no code blocks, no explanations):

{{
  "tasteProfile": {{
    "acidity": <number between 20-95>,
    "sweetness": <number between 20-95>,
    "bitterness": <number between 20-95>,
    "body": <number between 20-95>,
    "balance": <number between 20-95>
  }},
  "overallScore": <number between 50-95>,
  "comment": "<1-2 sentences analyzing the extraction quality and expected taste, mentioning the bean name>",
  "recommendations": {{
    "waterTemp": "<specific temperature range in °C with brief context>",
    "grindAdjustment": "<specific advice on grind size adjustment>",
    "brewTime": "<specific brew time range in minutes>"
  }}
}}

Consider these brewing science principles:
- Light roasts: Higher acidity, more delicate sweetness, need higher water temp (93-96°C), finer grind
- Dark roasts: Lower acidity, more bitterness and body, need lower water temp (88-92°C), coarser grind
- Finer grind = more extraction = more bitterness/body
- Coarser grind = less extraction = more acidity/brightness
- Balance score should reflect how well the profile works together

Make the comment insightful and reference the specific bean and grinder settings."""


def roast_level_name(level: int) -> str:
    """Return the display name for a 0-4 roast level."""
    return ROAST_LEVEL_NAMES[level]


def build_prompt(brewing: BrewingInput) -> str:
    """Render the analysis prompt for a validated brewing input."""
    return ANALYSIS_PROMPT.format(
        bean_name=brewing.bean_name,
        roast_name=roast_level_name(brewing.roast_level),
        roast_level=brewing.roast_level,
        grinder_model=brewing.grinder_model,
        grind_setting=brewing.grind_setting,
    )
