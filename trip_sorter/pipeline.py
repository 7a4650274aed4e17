"""High-level pipeline orchestration for the travel card sorter.

The pipeline is organized in several stages:

1. Card acquisition (a JSON file or in-memory records).
2. Import and validation of the raw cards.
3. Origin index and path reconstruction.
4. Rendering (plain text or HTML).

This module wires these stages together and exposes them to the
command line. Each step delegates work to dedicated, testable modules.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Sequence

from .adapters.rendering import RENDERERS, make_renderer
from .config import RenderingConfig, get_config
from .container import Container
from .domain.errors import TripSorterError
from .monitoring import configure_logging
from .services import ItinerarySortingService

# Madrid to New York, deliberately shuffled
SAMPLE_CARDS: List[Dict[str, Any]] = [
    {
        "origin": {"name": "Stockholm"},
        "destination": {"name": "New York JFK"},
        "transport": {
            "type": "plane",
            "route": "SK22",
            "gate": "22",
            "seat": "7B",
            "notes": "Baggage will be automatically transferred from your last leg.",
        },
    },
    {
        "origin": {"name": "Barcelona"},
        "destination": {"name": "Gerona Airport"},
        "transport": {"type": "airport_bus"},
    },
    {
        "origin": {"name": "Madrid"},
        "destination": {"name": "Barcelona"},
        "transport": {"type": "train", "route": "78A", "seat": "45B"},
    },
    {
        "origin": {"name": "Gerona Airport"},
        "destination": {"name": "Stockholm"},
        "transport": {
            "type": "plane",
            "route": "SK455",
            "gate": "45B",
            "seat": "3A",
            "baggage_drop": "344",
        },
    },
]


def sort_travel_cards(
    cards: Sequence[Mapping[str, Any]],
    renderer_name: str = "text",
    *,
    rendering: Optional[RenderingConfig] = None,
) -> str:
    """Sort the cards and return the rendered itinerary or an error message.

    This helper is designed to be reused from other front-ends
    (CLI, web handlers, tests, etc.).
    """
    try:
        renderer = make_renderer(renderer_name, rendering or get_config().rendering)
        return ItinerarySortingService(renderer=renderer).describe(cards)
    except TripSorterError as e:
        return f"Error: could not build itinerary: {e}"


def _parse_args(argv: Optional[Sequence[str]]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="trip-sorter",
        description="Sort unordered travel cards into a single itinerary.",
    )
    parser.add_argument(
        "cards",
        nargs="?",
        type=Path,
        help="JSON file with the cards (default: configured cards file, "
        "or the built-in sample trip when it does not exist)",
    )
    parser.add_argument(
        "--renderer",
        choices=sorted(RENDERERS),
        default=None,
        help="Output format (default: TSR_RENDER_DEFAULT_RENDERER)",
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Command-line entry point. Returns the process exit code."""
    args = _parse_args(argv)
    config = get_config()
    configure_logging(config.observability)

    try:
        container = Container.create_default(
            config, cards_path=args.cards, renderer_name=args.renderer
        )
        service = container.resolve(ItinerarySortingService)
        if args.cards is None and not config.cards.cards_path.exists():
            print(service.describe(SAMPLE_CARDS))
        else:
            print(service.load_and_describe())
    except TripSorterError as e:
        print(f"could not build itinerary: {e}", file=sys.stderr)
        return 1

    return 0


def run_pipeline() -> None:
    """Sort the built-in sample trip and print it."""
    print("Cards:", len(SAMPLE_CARDS))
    print(sort_travel_cards(SAMPLE_CARDS))


if __name__ == "__main__":
    sys.exit(main())
