"""Command line entry point."""

import argparse
import asyncio
import logging
from pathlib import Path

from nutrient_finder.app_logging import configure_logging
from nutrient_finder.containers import AppContainer, build_container

_logger = logging.getLogger(__name__)


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="nutrient-finder",
        description="Write a CSV of selected nutrients for a list of FDC foods.",
    )
    parser.add_argument("--input", type=Path, help="file with one FDC id per line")
    parser.add_argument("--output", type=Path, help="CSV file to write")
    parser.add_argument(
        "--verbose", action="store_true", help="log debug messages such as unit fallbacks"
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None, container: AppContainer | None = None) -> int:
    """Run the report and return a process exit code."""
    args = _parse_args(argv)
    configure_logging(logging.DEBUG if args.verbose else logging.INFO)
    container = container or build_container()
    input_path = args.input or container.settings.input_path
    output_path = args.output or container.settings.output_path
    try:
        asyncio.run(container.report_service.generate(input_path, output_path))
    except Exception:
        _logger.exception("Nutrient report failed")
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
