"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from recipe_nutrition.adapters.edamam_client import (
    HttpxNutritionAnalysisClient,
    NutritionAnalysisClient,
)
from recipe_nutrition.config import Settings
from recipe_nutrition.services.nutrition import NutritionService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    nutrition_client: NutritionAnalysisClient
    nutrition_service: NutritionService
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    nutrition_client = HttpxNutritionAnalysisClient.create(
        app_id=resolved_settings.edamam_app_id,
        app_key=resolved_settings.edamam_app_key,
        base_url=resolved_settings.edamam_base_url,
        nutrition_type=resolved_settings.edamam_nutrition_type,
    )
    nutrition_service = NutritionService(
        client=nutrition_client,
        debug=resolved_settings.nutrition_debug,
    )

    async def close_resources() -> None:
        await nutrition_client.close()

    return AppContainer(
        settings=resolved_settings,
        nutrition_client=nutrition_client,
        nutrition_service=nutrition_service,
        close_resources=close_resources,
    )
