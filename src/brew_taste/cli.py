"""Command-line interface for brew-taste."""

import argparse
import logging
import sys

from brew_taste import __version__, analyze
from brew_taste.exceptions import ValidationError
from brew_taste.validation import validate_request


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        prog="brew-taste",
        description="Predict a coffee's taste profile from brewing parameters",
    )
    parser.add_argument("--bean", required=True, help="Coffee bean name")
    parser.add_argument(
        "--roast",
        type=int,
        required=True,
        help="Roast level from 0 (Light) to 4 (Dark)",
    )
    parser.add_argument("--grinder", required=True, help="Grinder model")
    parser.add_argument("--grind-size", type=float, required=True, help="Grind size")
    parser.add_argument(
        "--unit",
        choices=["clicks", "microns"],
        default="clicks",
        help="Grind size unit (default: clicks)",
    )
    parser.add_argument(
        "--api-key",
        help="Gemini API key (default: GEMINI_API_KEY env var)",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Output as JSON",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log which analysis path was used",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"brew-taste {__version__}",
    )

    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    try:
        brewing = validate_request(
            {
                "beanName": args.bean,
                "roastLevel": args.roast,
                "grinderModel": args.grinder,
                "grindSize": args.grind_size,
                "grindUnit": args.unit,
            }
        )
    except ValidationError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    result = analyze(brewing, api_key=args.api_key)

    if args.json:
        print(result.model_dump_json(indent=2, by_alias=True))
    else:
        _print_formatted(result)

    return 0


def _print_formatted(result) -> None:
    """Print result in human-readable format."""
    print()
    print("  brew-taste")
    print()

    profile = result.taste_profile
    fields = [
        ("Acidity", _format_bar(profile.acidity)),
        ("Sweetness", _format_bar(profile.sweetness)),
        ("Bitterness", _format_bar(profile.bitterness)),
        ("Body", _format_bar(profile.body)),
        ("Balance", _format_bar(profile.balance)),
        ("Score", str(result.overall_score)),
        ("Water Temp", result.recommendations.water_temp),
        ("Grind", result.recommendations.grind_adjustment),
        ("Brew Time", result.recommendations.brew_time),
    ]

    for label, value in fields:
        print(f"  {label + ':':<12} {value}")

    print()
    print(f"  {result.comment}")
    print()


def _format_bar(value: int, width: int = 20) -> str:
    """Render a 0-100 value as a text bar followed by the number."""
    filled = round(value / 100 * width)
    return f"{'#' * filled}{'.' * (width - filled)} {value}"


if __name__ == "__main__":
    sys.exit(main())
