"""Batched food lookups against USDA FDC."""

import logging
from dataclasses import dataclass

from pydantic import TypeAdapter

from nutrient_finder.adapters.fdc_client import FdcClient
from nutrient_finder.adapters.fdc_models import FdcFood

MAX_FOODS_PER_REQUEST = 20

_FOODS_ADAPTER = TypeAdapter(list[FdcFood])

_logger = logging.getLogger(__name__)


@dataclass
class FoodService:
    """Service that fetches abridged foods one batch at a time."""

    fdc_client: FdcClient

    async def fetch_foods(self, fdc_ids: list[int]) -> list[FdcFood]:
        """Fetch up to MAX_FOODS_PER_REQUEST foods, sorted by FDC id.

        FDC does not return foods in request order, so the result is
        re-sorted before it is handed back.
        """
        if len(fdc_ids) > MAX_FOODS_PER_REQUEST:
            raise ValueError(
                f"Cannot retrieve more than [{MAX_FOODS_PER_REQUEST}] foods per request"
            )
        payload = await self.fdc_client.get_foods(list(fdc_ids), data_format="abridged")
        foods = _FOODS_ADAPTER.validate_python(payload)
        if len(foods) != len(fdc_ids):
            _logger.warning(
                "FDC returned %s foods for %s requested ids", len(foods), len(fdc_ids)
            )
        return sorted(foods, key=lambda food: food.fdc_id)
