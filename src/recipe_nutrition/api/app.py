"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import httpx
from fastapi import FastAPI, HTTPException, Request, status

from recipe_nutrition.api.models import AnalyzeRequest, AnalyzeResponse, CatalogEntry
from recipe_nutrition.app_logging import configure_logging
from recipe_nutrition.containers import AppContainer
from recipe_nutrition.domain.nutrients import Nutrient, get_nutrient_common_name


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(debug=container.settings.nutrition_debug)
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        yield
        await app.state.container.close_resources()

    app = FastAPI(lifespan=lifespan)
    app.state.container = container

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.get("/nutrients")
    async def list_nutrients() -> list[CatalogEntry]:
        """Return the nutrient catalog in display order."""
        return [
            CatalogEntry(code=nutrient.value, name=get_nutrient_common_name(nutrient))
            for nutrient in Nutrient
        ]

    @app.post("/nutrition/analyze")
    async def analyze(body: AnalyzeRequest, request: Request) -> AnalyzeResponse:
        """Resolve ingredient lines and return merged recipe nutrition."""
        state_container: AppContainer = request.app.state.container
        try:
            analysis = await state_container.nutrition_service.analyze_recipe(
                body.ingredients
            )
        except ValueError as exc:
            logger.exception("Failed to parse ingredients")
            raise HTTPException(status_code=422, detail=str(exc)) from exc
        except httpx.HTTPError as exc:
            logger.exception("Nutrition analysis request failed")
            raise HTTPException(
                status_code=status.HTTP_502_BAD_GATEWAY,
                detail="Nutrition analysis service unavailable",
            ) from exc
        return AnalyzeResponse.from_domain(analysis)

    return app
