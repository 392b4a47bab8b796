"""Nutrient enrichment for aggregated meals."""

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
from menu_ranker.adapters.menu_api_models import RawRecipeDetail
from menu_ranker.domain.menus import AggregatedMeal, CompositeIdentity
from menu_ranker.domain.nutrition import NutrientStats, RecipeDetail

_logger = logging.getLogger(__name__)


async def fetch_recipe_detail(
    client: MenuApiClient, identity: CompositeIdentity, language: str
) -> RecipeDetail:
    """Fetch and decode one recipe.

    Raises httpx.HTTPError on transport failure and ValueError (including
    pydantic.ValidationError) when the body cannot be decoded.
    """
    payload = await client.get_recipe(identity.provider, identity.recipe_id, language)
    return RawRecipeDetail.model_validate(payload).to_domain()


@dataclass
class NutrientEnricher:
    """Resolves protein and energy for meals with linked recipes."""

    client: MenuApiClient
    language: str = "fi"
    max_concurrent_requests: int = 16

    async def enrich(
        self, meals: Iterable[AggregatedMeal]
    ) -> dict[CompositeIdentity, NutrientStats]:
        """Return stats for every recipe that resolved with kcal and protein."""
        identities = list(
            dict.fromkeys(meal.identity for meal in meals if meal.has_recipe)
        )
        limiter = asyncio.Semaphore(self.max_concurrent_requests)
        results = await asyncio.gather(
            *(self._resolve(identity, limiter) for identity in identities)
        )
        stats = {
            identity: resolved
            for identity, resolved in zip(identities, results, strict=True)
            if resolved is not None
        }
        _logger.info(
            "Enriched recipes: requested=%s resolved=%s",
            len(identities),
            len(stats),
        )
        return stats

    async def _resolve(
        self, identity: CompositeIdentity, limiter: asyncio.Semaphore
    ) -> NutrientStats | None:
        """Fetch one recipe's stats, returning None when unavailable."""
        try:
            async with limiter:
                detail = await fetch_recipe_detail(self.client, identity, self.language)
        except httpx.HTTPError as exc:
            _logger.warning(
                "Recipe fetch failed for %s at %s (status=%s): %s",
                identity.recipe_id,
                identity.provider.value,
                status_code_from_exception(exc),
                exc,
            )
            return None
        except (ValidationError, ValueError) as exc:
            _logger.warning(
                "Recipe decode failed for %s at %s: %s",
                identity.recipe_id,
                identity.provider.value,
                exc,
            )
            return None
        stats = detail.nutrient_stats()
        if stats is None:
            _logger.debug(
                "Recipe %s at %s lacks kcal or protein",
                identity.recipe_id,
                identity.provider.value,
            )
        return stats
