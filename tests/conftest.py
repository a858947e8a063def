"""Shared test fixtures."""

from dataclasses import dataclass, field

import pytest

from nutrient_finder.adapters.fdc_client import FdcClient
from nutrient_finder.adapters.fdc_models import FdcFood
from nutrient_finder.config import Settings


def food_payload(
    fdc_id: int,
    description: str = "Food",
    nutrients: list[tuple[str, float, str]] | None = None,
) -> dict[str, object]:
    """Build an abridged FDC food payload from (number, amount, unit) tuples."""
    return {
        "fdcId": fdc_id,
        "description": description,
        "dataType": "SR Legacy",
        "publicationDate": "4/1/2019",
        "ndbNumber": fdc_id + 1000,
        "foodNutrients": [
            {"number": number, "name": f"Nutrient {number}", "amount": amount, "unitName": unit}
            for number, amount, unit in nutrients or []
        ],
    }


def make_food(
    fdc_id: int,
    description: str = "Food",
    nutrients: list[tuple[str, float, str]] | None = None,
) -> FdcFood:
    return FdcFood.model_validate(food_payload(fdc_id, description, nutrients))


@dataclass
class FakeFdcClient(FdcClient):
    """Fake FDC client serving canned payloads in reverse id order."""

    foods: dict[int, dict[str, object]] = field(default_factory=dict)
    requests: list[list[int]] = field(default_factory=list)

    async def get_foods(
        self, fdc_ids: list[int], data_format: str = "abridged"
    ) -> list[dict[str, object]]:
        self.requests.append(list(fdc_ids))
        found = [self.foods[fdc_id] for fdc_id in fdc_ids if fdc_id in self.foods]
        return list(reversed(found))


@dataclass
class FailingFdcClient(FdcClient):
    """Fake FDC client that fails on a given call."""

    fail_on_call: int = 1
    calls: int = 0

    async def get_foods(
        self, fdc_ids: list[int], data_format: str = "abridged"
    ) -> list[dict[str, object]]:
        self.calls += 1
        if self.calls >= self.fail_on_call:
            raise RuntimeError("FDC unavailable")
        return [food_payload(fdc_id) for fdc_id in fdc_ids]


@pytest.fixture
def settings(tmp_path) -> Settings:
    return Settings(
        fdc_api_key="fdc-key",
        fdc_base_url="https://api.test/fdc/v1",
        input_path=tmp_path / "FdcIds.txt",
        output_path=tmp_path / "UsdaFdcFoodNutrients.csv",
    )


@pytest.fixture
def fdc_client() -> FakeFdcClient:
    return FakeFdcClient(
        foods={
            1: food_payload(1, "Apples, raw", [("208", 52, "KCAL"), ("203", 0.26, "G")]),
            2: food_payload(2, "Beef", [("203", 26.1, "G"), ("303", 2600, "UG")]),
            3: food_payload(3, "Milk", [("301", 0.113, "G"), ("320", 0.046, "MG")]),
        }
    )
