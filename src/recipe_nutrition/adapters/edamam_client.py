"""Edamam nutrition analysis API client."""

import json
from dataclasses import dataclass
from typing import Protocol

import httpx


class NutritionAnalysisClient(Protocol):
    """Interface for nutrition analysis API interactions."""

    async def analyze_ingredient(self, text: str) -> dict[str, object]:
        """Analyze a free-text ingredient and return raw API data."""


@dataclass
class HttpxNutritionAnalysisClient(NutritionAnalysisClient):
    """HTTPX-backed Edamam nutrition analysis client."""

    app_id: str
    app_key: str
    base_url: str
    http_client: httpx.AsyncClient
    nutrition_type: str = "cooking"

    @classmethod
    def create(
        cls,
        app_id: str,
        app_key: str,
        base_url: str,
        nutrition_type: str = "cooking",
    ) -> "HttpxNutritionAnalysisClient":
        """Create a client with a managed httpx session."""
        return cls(
            app_id=app_id,
            app_key=app_key,
            base_url=base_url,
            http_client=httpx.AsyncClient(),
            nutrition_type=nutrition_type,
        )

    async def analyze_ingredient(self, text: str) -> dict[str, object]:
        """Fetch nutrition data for a single ingredient line."""
        url = f"{self.base_url}/nutrition-data"
        response = await self.http_client.get(
            url,
            params={
                "app_id": self.app_id,
                "app_key": self.app_key,
                "nutrition-type": self.nutrition_type,
                "ingr": text,
            },
            timeout=15,
        )
        response.raise_for_status()
        try:
            return response.json()
        except json.JSONDecodeError as exc:
            raise httpx.DecodingError(
                "Nutrition analysis response is not valid JSON", request=response.request
            ) from exc

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.http_client.aclose()
