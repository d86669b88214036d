"""Tests for container wiring."""

import asyncio

from recipe_nutrition.adapters.edamam_client import HttpxNutritionAnalysisClient
from recipe_nutrition.containers import build_container


def test_build_container_creates_services(settings) -> None:
    container = build_container(settings)

    assert isinstance(container.nutrition_client, HttpxNutritionAnalysisClient)
    assert container.nutrition_service.client is container.nutrition_client
    assert container.nutrition_client.app_id == "app-id"
    asyncio.run(container.close_resources())


def test_settings_defaults(settings) -> None:
    assert settings.edamam_base_url == "https://api.edamam.com/api"
    assert settings.edamam_nutrition_type == "cooking"
    assert settings.nutrition_debug is False
