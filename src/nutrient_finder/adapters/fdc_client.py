"""USDA FoodData Central API client."""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Protocol

import httpx


class FdcClient(Protocol):
    """Interface for FoodData Central API interactions."""

    async def get_foods(
        self, fdc_ids: list[int], data_format: str = "abridged"
    ) -> list[dict[str, object]]:
        """Fetch several foods by FDC id and return raw API data."""


@dataclass
class HttpxFdcClient(FdcClient):
    """HTTPX-backed FDC client.

    A new session is opened for every call and closed once the response
    has been read.
    """

    api_key: str
    base_url: str
    timeout: float = 30.0
    client_factory: Callable[[], httpx.AsyncClient] = httpx.AsyncClient

    @classmethod
    def create(
        cls, api_key: str, base_url: str, timeout: float = 30.0
    ) -> "HttpxFdcClient":
        """Create an FDC client that opens default httpx sessions."""
        return cls(api_key=api_key, base_url=base_url, timeout=timeout)

    async def get_foods(
        self, fdc_ids: list[int], data_format: str = "abridged"
    ) -> list[dict[str, object]]:
        """Fetch foods by FDC id."""
        url = f"{self.base_url}/foods"
        async with self.client_factory() as http_client:
            response = await http_client.post(
                url,
                params={"api_key": self.api_key},
                json={"fdcIds": fdc_ids, "format": data_format},
                timeout=self.timeout,
            )
            response.raise_for_status()
            return response.json()
