"""Tests for mass unit conversion."""

import pytest

from nutrient_finder.domain.units import Unit, convert


@pytest.mark.parametrize(
    ("amount", "actual", "desired", "expected"),
    [
        (1.5, Unit.G, Unit.MG, 1500.0),
        (2500, Unit.UG, Unit.MG, 2.5),
        (3, Unit.MG, Unit.UG, 3000.0),
        (7, Unit.NOT_MASS, Unit.UG, 7_000_000.0),
        (250, Unit.MG, Unit.G, 0.25),
    ],
)
def test_convert_scales_by_ratio(amount, actual, desired, expected) -> None:
    assert convert(amount, actual, desired) == pytest.approx(expected)
    assert convert(amount, actual, desired) == pytest.approx(
        amount * desired.scale / actual.scale
    )


def test_convert_same_unit_is_identity() -> None:
    for unit in Unit:
        assert convert(0.1, unit, unit) == 0.1
        assert convert(123.456789, unit, unit) == 123.456789


def test_not_mass_and_gram_share_scale() -> None:
    assert Unit.NOT_MASS.scale == 1
    assert Unit.G.scale == 1
    assert Unit.MG.scale == 1000
    assert Unit.UG.scale == 1_000_000
    assert convert(52, Unit.NOT_MASS, Unit.G) == 52


def test_parse_known_units() -> None:
    assert Unit.parse("G") is Unit.G
    assert Unit.parse("MG") is Unit.MG
    assert Unit.parse("UG") is Unit.UG
    assert Unit.parse("NotMass") is Unit.NOT_MASS


@pytest.mark.parametrize("unit_name", ["KCAL", "IU", "kJ", "mg", "", None])
def test_parse_unknown_units_fall_back_to_not_mass(unit_name) -> None:
    assert Unit.parse(unit_name) is Unit.NOT_MASS


def test_labels_match_header_names() -> None:
    assert [unit.label for unit in Unit] == ["NotMass", "G", "MG", "UG"]
