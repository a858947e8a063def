"""Turn FDC foods into report rows."""

from collections.abc import Sequence
from decimal import ROUND_HALF_UP, Decimal, localcontext

from nutrient_finder.adapters.fdc_models import FdcFood
from nutrient_finder.domain.catalog import DESIRED_NUTRIENTS, NutrientSpec
from nutrient_finder.domain.units import Unit, convert

_THOUSANDTHS = Decimal("0.001")


def build_header(catalog: Sequence[NutrientSpec] = DESIRED_NUTRIENTS) -> str:
    """Return the report header line."""
    return ",".join(["Food", "FDC ID", *(spec.header for spec in catalog)])


def sanitize_description(description: str) -> str:
    """Replace commas so the description stays a single CSV field."""
    return description.replace(",", ";")


def format_amount(amount: float) -> str:
    """Format with at most three decimals and no trailing zeros."""
    value = Decimal(repr(amount))
    with localcontext() as context:
        # integer digits plus three decimals must fit in the precision
        context.prec = max(context.prec, value.adjusted() + 5)
        rounded = value.quantize(_THOUSANDTHS, rounding=ROUND_HALF_UP)
    if rounded.is_zero():
        return "0"
    text = f"{rounded:f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def nutrient_amounts(food: FdcFood) -> dict[int, tuple[float, Unit]]:
    """Map nutrient number to (amount, unit); the last duplicate wins."""
    return {
        int(nutrient.number): (nutrient.amount, Unit.parse(nutrient.unit_name))
        for nutrient in food.food_nutrients
    }


def extract_row(
    food: FdcFood, catalog: Sequence[NutrientSpec] = DESIRED_NUTRIENTS
) -> list[str]:
    """Return the report fields for one food."""
    amounts = nutrient_amounts(food)
    row = [sanitize_description(food.description), str(food.fdc_id)]
    for spec in catalog:
        amount = 0.0
        if spec.is_available and spec.nutrient_id in amounts:
            actual_amount, actual_unit = amounts[spec.nutrient_id]
            amount = convert(actual_amount, actual_unit, spec.unit)
        row.append(format_amount(amount))
    return row


def format_row(
    food: FdcFood, catalog: Sequence[NutrientSpec] = DESIRED_NUTRIENTS
) -> str:
    """Return one report line for a food."""
    return ",".join(extract_row(food, catalog))
