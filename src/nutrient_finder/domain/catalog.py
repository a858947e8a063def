"""Nutrients reported for each food, in report column order."""

from dataclasses import dataclass

from nutrient_finder.domain.units import Unit


@dataclass(frozen=True)
class NutrientSpec:
    """A report column: FDC nutrient number, desired unit, display name.

    ``nutrient_id`` is None for nutrients FDC does not expose. Those columns
    are kept in the report and always read 0.
    """

    nutrient_id: int | None
    unit: Unit
    name: str

    @classmethod
    def unavailable(cls, unit: Unit, name: str) -> "NutrientSpec":
        """Create a column for a nutrient with no FDC number."""
        return cls(nutrient_id=None, unit=unit, name=name)

    @property
    def is_available(self) -> bool:
        return self.nutrient_id is not None

    @property
    def header(self) -> str:
        return f"{self.name} ({self.unit.label})"


DESIRED_NUTRIENTS: tuple[NutrientSpec, ...] = (
    NutrientSpec(208, Unit.NOT_MASS, "Calories"),
    NutrientSpec(204, Unit.G, "Total fat"),
    NutrientSpec(606, Unit.G, "Saturated fat"),
    NutrientSpec(646, Unit.G, "Polyunsaturated fat"),
    NutrientSpec(645, Unit.G, "Monounsaturated fat"),
    NutrientSpec(205, Unit.G, "Total carb"),
    NutrientSpec(291, Unit.G, "Dietary fiber"),
    NutrientSpec(269, Unit.G, "Sugar"),
    NutrientSpec(203, Unit.G, "Total protein"),
    NutrientSpec(512, Unit.MG, "Histidine"),
    NutrientSpec(503, Unit.MG, "Isoleucine"),
    NutrientSpec(504, Unit.MG, "Leucine"),
    NutrientSpec(505, Unit.MG, "Lysine"),
    NutrientSpec(506, Unit.MG, "Methionine"),
    NutrientSpec(508, Unit.MG, "Phenylalanine"),
    NutrientSpec(502, Unit.MG, "Threonine"),
    NutrientSpec(501, Unit.MG, "Tryptophan"),
    NutrientSpec(510, Unit.MG, "Valine"),
    NutrientSpec(601, Unit.MG, "Cholesterol"),
    NutrientSpec(320, Unit.UG, "Vitamin A"),
    NutrientSpec(404, Unit.MG, "Vitamin B1 Thiamin"),
    NutrientSpec(405, Unit.MG, "Vitamin B2 Riboflavin"),
    NutrientSpec(406, Unit.MG, "Vitamin B3 Niacin"),
    NutrientSpec(410, Unit.MG, "Vitamin B5 Pantothenic acid"),
    NutrientSpec(415, Unit.MG, "Vitamin B6"),
    NutrientSpec.unavailable(Unit.UG, "Vitamin B7 Biotin"),
    NutrientSpec(417, Unit.UG, "Vitamin B9 Folate"),
    NutrientSpec(418, Unit.UG, "Vitamin B12"),
    NutrientSpec(401, Unit.MG, "Vitamin C"),
    NutrientSpec(328, Unit.UG, "Vitamin D"),
    NutrientSpec(323, Unit.MG, "Vitamin E"),
    NutrientSpec(430, Unit.UG, "Vitamin K"),
    NutrientSpec(421, Unit.MG, "Choline"),
    NutrientSpec(307, Unit.MG, "Na"),
    NutrientSpec(304, Unit.MG, "Mg"),
    NutrientSpec(305, Unit.MG, "P"),
    NutrientSpec(306, Unit.MG, "K"),
    NutrientSpec(301, Unit.MG, "Ca"),
    NutrientSpec.unavailable(Unit.UG, "Cr"),
    NutrientSpec(315, Unit.MG, "Mn"),
    NutrientSpec(303, Unit.MG, "Fe"),
    NutrientSpec(312, Unit.UG, "Cu"),
    NutrientSpec(309, Unit.MG, "Zn"),
    NutrientSpec(317, Unit.UG, "Se"),
    NutrientSpec.unavailable(Unit.UG, "Mo"),
    NutrientSpec.unavailable(Unit.UG, "I"),
)
