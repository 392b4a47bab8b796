"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, HTTPException, Request, status

from menu_ranker.app_logging import configure_logging
from menu_ranker.config import parse_menu_date
from menu_ranker.containers import AppContainer
from menu_ranker.domain.menus import AggregatedMeal, PipelineRun
from menu_ranker.domain.nutrition import NutrientStats, RecipeDetail
from menu_ranker.domain.providers import parse_provider
from menu_ranker.services.details import DetailError, DetailUnavailableError


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging()
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

    @app.get("/restaurants")
    async def restaurants(request: Request) -> dict[str, object]:
        """Return the restaurants whose menus are aggregated."""
        state_container: AppContainer = request.app.state.container
        return {
            "restaurants": [
                {
                    "name": restaurant.name,
                    "cost_center": restaurant.cost_center,
                    "provider": restaurant.provider.value,
                }
                for restaurant in state_container.pipeline.restaurants
            ]
        }

    @app.get("/menus")
    async def menus(request: Request, date: str | None = None) -> dict[str, object]:
        """Return today's meals ranked by kcal per gram of protein."""
        state_container: AppContainer = request.app.state.container
        menu_date = None
        if date is not None:
            try:
                menu_date = parse_menu_date(date)
            except ValueError as exc:
                raise HTTPException(
                    status_code=status.HTTP_400_BAD_REQUEST,
                    detail="date must be YYYY-MM-DD",
                ) from exc
        run = await state_container.pipeline.run(date=menu_date)
        return _format_run(run)

    @app.get("/recipes/{provider}/{recipe_id}")
    async def recipe_detail(
        provider: str, recipe_id: int, request: Request
    ) -> dict[str, object]:
        """Return full recipe detail for one meal."""
        state_container: AppContainer = request.app.state.container
        parsed_provider = parse_provider(provider)
        if parsed_provider is None:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND, detail="unknown provider"
            )
        try:
            detail = await state_container.detail_resolver.resolve(
                recipe_id, parsed_provider
            )
        except DetailUnavailableError as exc:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)
            ) from exc
        except DetailError as exc:
            logger.warning("Recipe detail unavailable: %s", exc)
            raise HTTPException(
                status_code=status.HTTP_502_BAD_GATEWAY, detail=str(exc)
            ) from exc
        return _format_detail(detail, parsed_provider.value)

    return app


def _format_run(run: PipelineRun) -> dict[str, object]:
    """Serialize a pipeline run for the menus endpoint."""
    return {
        "date": run.date,
        "language": run.language,
        "meals": [_format_meal(meal, run.stats_for(meal)) for meal in run.ranked],
    }


def _format_meal(
    meal: AggregatedMeal, stats: NutrientStats | None
) -> dict[str, object]:
    """Serialize a ranked meal with its nutrition, if any."""
    nutrition: dict[str, object] | None = None
    if stats is not None:
        nutrition = {
            "protein_g": stats.protein_g,
            "kcal": stats.kcal,
            "kcal_per_protein_g": stats.ratio if stats.is_rankable else None,
        }
    return {
        "id": meal.id,
        "name": meal.name,
        "recipe_id": meal.recipe_id,
        "diets": list(meal.diets),
        "icon_url": meal.icon_url,
        "restaurant": meal.restaurant_name,
        "provider": meal.provider.value,
        "nutrition": nutrition,
    }


def _format_detail(detail: RecipeDetail, provider: str) -> dict[str, object]:
    """Serialize recipe detail for the recipes endpoint."""
    return {
        "recipe_id": detail.recipe_id,
        "provider": provider,
        "name": detail.name,
        "ingredients": detail.ingredients,
        "last_modified": detail.last_modified,
        "nutritional_values": [
            {
                "name": value.name,
                "code": value.code.value,
                "amount": value.amount,
                "unit": value.unit,
            }
            for value in detail.nutritional_values
        ],
        "kg_co2e_per_100g": detail.co2_per_100g,
        "diets": detail.diets,
    }
