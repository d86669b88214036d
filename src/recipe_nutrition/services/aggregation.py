"""Aggregation of nutrient profiles across foods."""

import logging
from collections.abc import Iterable

from recipe_nutrition.domain.nutrients import Nutrient
from recipe_nutrition.domain.nutrition import (
    FoodInfo,
    FoodNutrientMap,
    NutrientProfile,
    UnitValue,
)

# Sort key for nutrients without a daily value; places them after 100%.
MISSING_DAILY_VALUE_RANK = 1.1

_logger = logging.getLogger(__name__)


def sum_nutrients(profiles: Iterable[NutrientProfile]) -> dict[Nutrient, UnitValue]:
    """Sum nutrient profiles, keeping the unit and label seen first."""
    total: dict[Nutrient, UnitValue] = {}
    for profile in profiles:
        for nutrient, value in profile.items():
            previous = total.get(nutrient)
            if previous is None:
                total[nutrient] = value
                continue
            if previous.unit != value.unit:
                _logger.warning(
                    "Unit mismatch for %s: %s %s vs %s %s",
                    nutrient.name,
                    previous.quantity,
                    previous.unit,
                    value.quantity,
                    value.unit,
                )
            total[nutrient] = UnitValue(
                unit=previous.unit,
                label=previous.label,
                quantity=previous.quantity + value.quantity,
                percent_daily=_add_percent_daily(
                    previous.percent_daily, value.percent_daily
                ),
            )
    return total


def _add_percent_daily(first: float | None, second: float | None) -> float | None:
    if first is None and second is None:
        return None
    return (first or 0.0) + (second or 0.0)


def combine_food_nutrient_maps(
    a: FoodNutrientMap, b: FoodNutrientMap
) -> dict[str, FoodInfo]:
    """Merge two food maps, summing foods that share a key."""
    combined: dict[str, FoodInfo] = dict(a)
    for key, food in b.items():
        previous = combined.get(key)
        if previous is None:
            combined[key] = food
            continue
        combined[key] = FoodInfo(
            name=previous.name,
            quantity=previous.quantity + food.quantity,
            measure=previous.measure,
            nutrients=sum_nutrients([previous.nutrients, food.nutrients]),
        )
    return combined


def total_nutrients(foods: FoodNutrientMap) -> dict[Nutrient, UnitValue]:
    """Return the summed nutrient profile of every food in the map."""
    return sum_nutrients(food.nutrients for food in foods.values())


def sort_by_daily_value(
    profile: NutrientProfile,
) -> list[tuple[Nutrient, UnitValue]]:
    """Order nutrients by ascending percent daily value.

    Nutrients without a daily value rank as 110%, so they follow every
    nutrient that has not exceeded its daily value.
    """
    return sorted(
        profile.items(),
        key=lambda item: (
            MISSING_DAILY_VALUE_RANK
            if item[1].percent_daily is None
            else item[1].percent_daily
        ),
    )
