"""Mass units used by FDC nutrient amounts."""

import logging
from enum import Enum

_logger = logging.getLogger(__name__)


class Unit(Enum):
    """Mass unit with its scale relative to one gram."""

    NOT_MASS = "NotMass"
    G = "G"
    MG = "MG"
    UG = "UG"

    @property
    def scale(self) -> int:
        """Number of this unit in one gram (1 for non-mass units)."""
        return _SCALES[self]

    @property
    def label(self) -> str:
        """Label used in report headers."""
        return self.value

    @classmethod
    def parse(cls, unit_name: str | None) -> "Unit":
        """Parse an FDC unit name, falling back to NOT_MASS."""
        for unit in cls:
            if unit.value == unit_name:
                return unit
        _logger.debug("Unrecognized unit %r treated as %s", unit_name, cls.NOT_MASS.value)
        return cls.NOT_MASS


_SCALES: dict[Unit, int] = {
    Unit.NOT_MASS: 1,
    Unit.G: 1,
    Unit.MG: 1000,
    Unit.UG: 1_000_000,
}


def convert(amount: float, actual: Unit, desired: Unit) -> float:
    """Convert an amount between units; same-unit conversion is a no-op."""
    if actual is desired:
        return amount
    return amount * desired.scale / actual.scale
