"""Pydantic models for the nutrition analysis API."""

from pydantic import BaseModel, Field

from recipe_nutrition.domain.nutrients import Nutrient, get_nutrient_common_name
from recipe_nutrition.domain.nutrition import FoodInfo, RecipeAnalysis, UnitValue


class AnalyzeRequest(BaseModel):
    """Ingredient lines to analyze; each line may hold comma separated items."""

    ingredients: list[str] = Field(min_length=1)


class NutrientAmount(BaseModel):
    """A nutrient amount with its display name."""

    nutrient: str
    name: str
    quantity: float
    unit: str
    label: str
    percent_daily: float | None = None

    @classmethod
    def from_domain(cls, nutrient: Nutrient, value: UnitValue) -> "NutrientAmount":
        return cls(
            nutrient=nutrient.value,
            name=get_nutrient_common_name(nutrient),
            quantity=value.quantity,
            unit=value.unit,
            label=value.label,
            percent_daily=value.percent_daily,
        )


class FoodEntry(BaseModel):
    """A resolved food with its nutrient amounts."""

    key: str
    name: str
    quantity: float
    measure: str
    nutrients: list[NutrientAmount]

    @classmethod
    def from_domain(cls, food: FoodInfo) -> "FoodEntry":
        return cls(
            key=food.key,
            name=food.name,
            quantity=food.quantity,
            measure=food.measure,
            nutrients=[
                NutrientAmount.from_domain(nutrient, value)
                for nutrient, value in food.nutrients.items()
            ],
        )


class AnalyzeResponse(BaseModel):
    """Merged foods and recipe totals in daily value order."""

    foods: list[FoodEntry]
    totals: list[NutrientAmount]

    @classmethod
    def from_domain(cls, analysis: RecipeAnalysis) -> "AnalyzeResponse":
        return cls(
            foods=[FoodEntry.from_domain(food) for food in analysis.foods.values()],
            totals=[
                NutrientAmount.from_domain(nutrient, value)
                for nutrient, value in analysis.totals
            ],
        )


class CatalogEntry(BaseModel):
    """A nutrient code and its display name."""

    code: str
    name: str
