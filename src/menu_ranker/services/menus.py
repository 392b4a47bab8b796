"""Menu aggregation across restaurants."""

import asyncio
import logging
from collections.abc import Iterable
from dataclasses import dataclass

import httpx
from pydantic import ValidationError

from menu_ranker.adapters.menu_api_client import (
    MenuApiClient,
    status_code_from_exception,
)
from menu_ranker.adapters.menu_api_models import RawMenuResponse
from menu_ranker.domain.menus import AggregatedMeal, synthetic_meal_id
from menu_ranker.domain.restaurants import RestaurantDescriptor

_logger = logging.getLogger(__name__)


@dataclass
class MenuAggregator:
    """Fetches day menus for many restaurants concurrently."""

    client: MenuApiClient
    language: str = "fi"
    max_concurrent_requests: int = 16

    async def aggregate(
        self, restaurants: Iterable[RestaurantDescriptor], date: str
    ) -> list[AggregatedMeal]:
        """Return every meal served on a date across the given restaurants.

        A restaurant whose menu cannot be fetched or decoded contributes no
        meals; the failure is logged and the other restaurants are unaffected.
        """
        limiter = asyncio.Semaphore(self.max_concurrent_requests)
        chunks = await asyncio.gather(
            *(
                self._restaurant_meals(restaurant, date, limiter)
                for restaurant in restaurants
            )
        )
        meals = [meal for chunk in chunks for meal in chunk]
        _logger.info(
            "Aggregated menus: date=%s restaurants=%s meals=%s",
            date,
            len(chunks),
            len(meals),
        )
        return meals

    async def _restaurant_meals(
        self,
        restaurant: RestaurantDescriptor,
        date: str,
        limiter: asyncio.Semaphore,
    ) -> list[AggregatedMeal]:
        """Fetch one restaurant's menu, returning no meals on failure."""
        try:
            async with limiter:
                payload = await self.client.get_day_menu(
                    restaurant.provider,
                    restaurant.cost_center,
                    date,
                    self.language,
                )
            menu = RawMenuResponse.model_validate(payload)
        except httpx.HTTPError as exc:
            _logger.warning(
                "Day menu fetch failed for %s (%s, status=%s): %s",
                restaurant.name,
                restaurant.provider.value,
                status_code_from_exception(exc),
                exc,
            )
            return []
        except (ValidationError, ValueError) as exc:
            _logger.warning(
                "Day menu decode failed for %s (%s): %s",
                restaurant.name,
                restaurant.provider.value,
                exc,
            )
            return []
        return [
            AggregatedMeal(
                id=synthetic_meal_id(meal.recipe_id, meal.name, restaurant.provider),
                name=meal.name,
                recipe_id=meal.recipe_id,
                diets=tuple(meal.diets),
                icon_url=meal.icon_url,
                restaurant_name=restaurant.name,
                provider=restaurant.provider,
            )
            for meal in menu.meals()
        ]

