"""Nutrition domain models."""

from collections.abc import Mapping
from dataclasses import dataclass

from recipe_nutrition.domain.nutrients import Nutrient


@dataclass(frozen=True)
class UnitValue:
    """Measured amount of one nutrient, with its optional percent daily value."""

    unit: str
    label: str
    quantity: float
    percent_daily: float | None = None


NutrientProfile = Mapping[Nutrient, UnitValue]


def food_key(name: str, measure: str) -> str:
    """Build the food map key for a matched food and its measure."""
    return f"{name} ({measure})"


@dataclass(frozen=True)
class FoodInfo:
    """A resolved ingredient and its nutrient profile."""

    name: str
    quantity: float
    measure: str
    nutrients: NutrientProfile

    @property
    def key(self) -> str:
        return food_key(self.name, self.measure)


FoodNutrientMap = Mapping[str, FoodInfo]


@dataclass(frozen=True)
class RecipeAnalysis:
    """Merged foods of a recipe with its totals in daily value order."""

    foods: dict[str, FoodInfo]
    totals: list[tuple[Nutrient, UnitValue]]
