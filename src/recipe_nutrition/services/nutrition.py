"""Nutrition service integrating the Edamam nutrition analysis API."""

import logging
import re
from collections.abc import Mapping, Sequence
from dataclasses import dataclass

from recipe_nutrition.adapters.edamam_client import NutritionAnalysisClient
from recipe_nutrition.domain.nutrients import Nutrient
from recipe_nutrition.domain.nutrition import FoodInfo, RecipeAnalysis, UnitValue
from recipe_nutrition.services.aggregation import (
    combine_food_nutrient_maps,
    sort_by_daily_value,
    total_nutrients,
)

# Reference amounts for nutrients the service reports without a daily value.
_FALLBACK_DAILY_REFERENCE = {
    Nutrient.MONOUNSATURATED_FAT: 36,
    Nutrient.POLYUNSATURATED_FAT: 15,
    Nutrient.CHOLESTEROL: 150,
}

_INGREDIENT_SEPARATOR = re.compile(r"\s*,\s*")

_logger = logging.getLogger(__name__)


@dataclass
class NutritionService:
    """Service resolving ingredient text into nutrient profiles."""

    client: NutritionAnalysisClient
    debug: bool = False

    async def get_nutrient_values(self, input_text: str) -> dict[str, FoodInfo]:
        """Resolve comma separated ingredients one request at a time.

        Results keep input order; a later ingredient resolving to the same
        food and measure replaces the earlier one.
        """
        foods: dict[str, FoodInfo] = {}
        for ingredient in split_ingredients(input_text):
            payload = await self.client.analyze_ingredient(ingredient)
            food = parse_food_info(payload, ingredient)
            foods[food.key] = food
            if self.debug:
                _logger.info(
                    "Nutrition ingredient resolved: ingredient=%s food=%s nutrients=%s",
                    ingredient,
                    food.key,
                    len(food.nutrients),
                )
        return foods

    async def analyze_recipe(self, ingredient_lines: Sequence[str]) -> RecipeAnalysis:
        """Resolve every line and merge the results into recipe totals."""
        foods: dict[str, FoodInfo] = {}
        for line in ingredient_lines:
            resolved = await self.get_nutrient_values(line)
            foods = combine_food_nutrient_maps(foods, resolved)
        return RecipeAnalysis(
            foods=foods,
            totals=sort_by_daily_value(total_nutrients(foods)),
        )


def split_ingredients(text: str) -> list[str]:
    """Split comma separated ingredient text, dropping empty entries."""
    return [part for part in _INGREDIENT_SEPARATOR.split(text.strip()) if part]


def parse_nutrient_profile(payload: Mapping[str, object]) -> dict[Nutrient, UnitValue]:
    """Extract the reported nutrients from an analysis payload."""
    reported = payload.get("totalNutrients")
    if reported is None:
        raise ValueError("Nutrition analysis payload has no totalNutrients section")
    total_daily = payload.get("totalDaily") or {}
    profile: dict[Nutrient, UnitValue] = {}
    for nutrient in Nutrient:
        entry = reported.get(nutrient.value)
        if entry is None:
            continue
        quantity = entry["quantity"]
        daily = total_daily.get(nutrient.value)
        if daily is not None:
            percent_daily = daily["quantity"]
        elif nutrient in _FALLBACK_DAILY_REFERENCE:
            percent_daily = quantity / _FALLBACK_DAILY_REFERENCE[nutrient]
        else:
            percent_daily = None
        profile[nutrient] = UnitValue(
            unit=entry["unit"],
            label=entry["label"],
            quantity=quantity,
            percent_daily=percent_daily,
        )
    return profile


def parse_food_info(payload: Mapping[str, object], ingredient: str = "") -> FoodInfo:
    """Build a food entry from the first parsed ingredient of a payload."""
    ingredients = payload.get("ingredients") or []
    parsed = ingredients[0].get("parsed") if ingredients else None
    if not parsed:
        raise ValueError(f"Nutrition service could not parse ingredient: {ingredient!r}")
    match = parsed[0]
    return FoodInfo(
        name=match["foodMatch"],
        quantity=match["quantity"],
        measure=match["measure"],
        nutrients=parse_nutrient_profile(payload),
    )
