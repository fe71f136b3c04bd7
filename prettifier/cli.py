"""Command-line entry point.

    prettifier ./input.txt ./output.txt ./airport-lookup.csv

Exit status is 0 on success, 1 when an input is missing or the airport
lookup is malformed (nothing is written), and 2 on invalid usage.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from pydantic import ValidationError

from .adapters.airports import CSVAirportRepository
from .adapters.storage import TextFileStore
from .config import AppConfig, ObservabilityConfig, get_config
from .domain.errors import (
    ConfigurationError,
    MalformedReferenceDataError,
    OutputWriteError,
    ReferenceOrInputNotFoundError,
)
from .services import ItineraryPrettifierService

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_USAGE = 2

RED = "\033[31m"
GREEN = "\033[32m"
YELLOW = "\033[33m"
RESET = "\033[0m"


class _Painter:
    def __init__(self, enabled: bool) -> None:
        self.enabled = enabled

    def __call__(self, text: str, color: str) -> str:
        return f"{color}{text}{RESET}" if self.enabled else text


def build_parser() -> argparse.ArgumentParser:
    """Set up the argument parser; usage and help are printed by main()."""
    parser = argparse.ArgumentParser(
        prog="prettifier",
        description="Prettify an itinerary using an airport lookup table.",
        add_help=False,
    )
    parser.add_argument("-h", "--help", action="store_true")
    parser.add_argument(
        "paths",
        nargs="*",
        metavar="PATH",
        help="input itinerary, output file and airport lookup CSV",
    )
    return parser


def print_usage(paint: _Painter) -> None:
    print(paint("How to use Itinerary:", YELLOW))
    print(paint("prettifier ./input.txt ./output.txt ./airport-lookup.csv", GREEN))


def configure_logging(config: ObservabilityConfig) -> None:
    logging.basicConfig(level=config.level, format=config.format)


def _load_config() -> AppConfig:
    try:
        return get_config()
    except ValidationError as e:
        raise ConfigurationError(
            "Invalid configuration", setting_name=str(e.errors()[0]["loc"]), cause=e
        )


def _error(paint: _Painter, message: str) -> None:
    print(paint(f"Error: {message}", RED), file=sys.stderr)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the prettifier and return the process exit status."""
    try:
        config = _load_config()
    except ConfigurationError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_FAILURE

    paint = _Painter(config.cli.color)
    configure_logging(config.observability)

    args = build_parser().parse_args(argv)
    if args.help and not args.paths:
        print_usage(paint)
        return EXIT_OK
    if args.help or len(args.paths) != 3:
        _error(paint, "Invalid number of arguments.")
        print_usage(paint)
        return EXIT_USAGE

    input_path, output_path, lookup_path = (Path(p) for p in args.paths)
    service = ItineraryPrettifierService(
        airport_repository=CSVAirportRepository(lookup_path, config=config.io),
        store=TextFileStore(config=config.io),
    )

    try:
        service.prettify_file(input_path, output_path)
    except ReferenceOrInputNotFoundError as e:
        _error(paint, f"{e.message}.")
        return EXIT_FAILURE
    except MalformedReferenceDataError as e:
        _error(paint, f"Airport lookup malformed: {e.message}.")
        return EXIT_FAILURE
    except OutputWriteError as e:
        _error(paint, f"{e.message}: {e.path}.")
        return EXIT_FAILURE

    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
