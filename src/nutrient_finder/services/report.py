"""Nutrient report generation from a list of FDC ids."""

import logging
from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from pathlib import Path

from nutrient_finder.adapters.fdc_models import FdcFood
from nutrient_finder.domain.catalog import DESIRED_NUTRIENTS, NutrientSpec
from nutrient_finder.services.extractor import build_header, format_row
from nutrient_finder.services.foods import MAX_FOODS_PER_REQUEST, FoodService

_logger = logging.getLogger(__name__)


def read_food_ids(path: Path) -> list[int]:
    """Read one FDC id per line; blank or non-integer lines are errors."""
    text = path.read_text(encoding="utf-8")
    fdc_ids: list[int] = []
    for line_number, line in enumerate(text.split("\n"), start=1):
        try:
            fdc_ids.append(int(line))
        except ValueError:
            raise ValueError(
                f"{path}:{line_number}: expected an FDC id, got {line!r}"
            ) from None
    return fdc_ids


def chunked(values: Sequence[int], size: int) -> Iterator[list[int]]:
    """Yield consecutive chunks of at most ``size`` values."""
    if size < 1:
        raise ValueError("Chunk size must be positive")
    for start in range(0, len(values), size):
        yield list(values[start : start + size])


def write_report(
    path: Path,
    foods: Sequence[FdcFood],
    catalog: Sequence[NutrientSpec] = DESIRED_NUTRIENTS,
) -> None:
    """Write the header and one line per food, replacing any existing file.

    Every row is formatted before the file is opened, so a bad food leaves
    the existing file as it was.
    """
    lines = [build_header(catalog), *(format_row(food, catalog) for food in foods)]
    with path.open("w", encoding="utf-8", newline="") as file:
        file.writelines(line + "\n" for line in lines)


@dataclass
class ReportService:
    """Fetches foods chunk by chunk and writes the nutrient report."""

    food_service: FoodService
    catalog: Sequence[NutrientSpec] = DESIRED_NUTRIENTS
    chunk_size: int = MAX_FOODS_PER_REQUEST

    async def collect_foods(self, fdc_ids: Sequence[int]) -> list[FdcFood]:
        """Request each chunk in turn; rows keep chunk order."""
        foods: list[FdcFood] = []
        for index, chunk in enumerate(chunked(fdc_ids, self.chunk_size), start=1):
            _logger.info("Requesting chunk %s (%s foods)", index, len(chunk))
            foods.extend(await self.food_service.fetch_foods(chunk))
        return foods

    async def generate(self, input_path: Path, output_path: Path) -> int:
        """Build the report and return the number of rows written."""
        fdc_ids = read_food_ids(input_path)
        _logger.info("Read %s FDC ids from %s", len(fdc_ids), input_path)
        foods = await self.collect_foods(fdc_ids)
        write_report(output_path, foods, self.catalog)
        _logger.info("Wrote %s rows to %s", len(foods), output_path)
        return len(foods)
