"""Shared test fixtures."""

from dataclasses import dataclass, field

import pytest

from recipe_nutrition.adapters.edamam_client import NutritionAnalysisClient
from recipe_nutrition.config import Settings
from recipe_nutrition.containers import AppContainer
from recipe_nutrition.services.nutrition import NutritionService


def analysis_payload(
    food_match: str,
    quantity: float,
    measure: str,
    nutrients: dict[str, tuple[float, str, str]],
    daily: dict[str, float] | None = None,
) -> dict[str, object]:
    """Build an Edamam-shaped nutrition-data response."""
    return {
        "totalNutrients": {
            code: {"label": label, "quantity": amount, "unit": unit}
            for code, (amount, unit, label) in nutrients.items()
        },
        "totalDaily": {
            code: {"label": code, "quantity": amount, "unit": "%"}
            for code, amount in (daily or {}).items()
        },
        "ingredients": [
            {
                "text": f"{quantity} {measure} {food_match}",
                "parsed": [
                    {
                        "quantity": quantity,
                        "measure": measure,
                        "foodMatch": food_match,
                    }
                ],
            }
        ],
    }


BANANA_PAYLOAD = analysis_payload(
    "banana",
    1,
    "whole",
    {
        "ENERC_KCAL": (105.0, "kcal", "Energy"),
        "CHOCDF": (27.0, "g", "Carbs"),
        "K": (422.0, "mg", "Potassium"),
        "WATER": (88.0, "g", "Water"),
    },
    daily={"ENERC_KCAL": 5.25, "CHOCDF": 9.0, "K": 8.98},
)

EGG_PAYLOAD = analysis_payload(
    "egg",
    2,
    "large",
    {
        "ENERC_KCAL": (143.0, "kcal", "Energy"),
        "PROCNT": (12.6, "g", "Protein"),
        "CHOLE": (372.0, "mg", "Cholesterol"),
        "FAMS": (3.6, "g", "Monounsaturated"),
    },
    daily={"ENERC_KCAL": 7.15, "PROCNT": 25.2},
)


@dataclass
class FakeNutritionAnalysisClient(NutritionAnalysisClient):
    """Fake analysis client returning canned payloads by ingredient text."""

    payloads: dict[str, dict[str, object]] = field(
        default_factory=lambda: {
            "1 banana": BANANA_PAYLOAD,
            "2 eggs": EGG_PAYLOAD,
        }
    )
    calls: list[str] = field(default_factory=list)

    async def analyze_ingredient(self, text: str) -> dict[str, object]:
        self.calls.append(text)
        return self.payloads[text]


@pytest.fixture
def settings() -> Settings:
    return Settings(edamam_app_id="app-id", edamam_app_key="app-key")


@pytest.fixture
def nutrition_client() -> FakeNutritionAnalysisClient:
    return FakeNutritionAnalysisClient()


@pytest.fixture
def container(
    settings: Settings, nutrition_client: FakeNutritionAnalysisClient
) -> AppContainer:
    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=settings,
        nutrition_client=nutrition_client,
        nutrition_service=NutritionService(client=nutrition_client),
        close_resources=close_resources,
    )
