"""Dependency container wiring for the application."""

from dataclasses import dataclass

from nutrient_finder.adapters.fdc_client import FdcClient, HttpxFdcClient
from nutrient_finder.config import Settings
from nutrient_finder.services.foods import FoodService
from nutrient_finder.services.report import ReportService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    fdc_client: FdcClient
    food_service: FoodService
    report_service: ReportService


def build_container(
    settings: Settings | None = None, fdc_client: FdcClient | None = None
) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    resolved_client = fdc_client or HttpxFdcClient.create(
        api_key=resolved_settings.fdc_api_key,
        base_url=resolved_settings.fdc_base_url,
        timeout=resolved_settings.fdc_timeout_seconds,
    )
    food_service = FoodService(fdc_client=resolved_client)
    report_service = ReportService(food_service=food_service)
    return AppContainer(
        settings=resolved_settings,
        fdc_client=resolved_client,
        food_service=food_service,
        report_service=report_service,
    )
