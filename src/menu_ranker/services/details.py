"""On-demand recipe detail lookup."""

import logging
from dataclasses import dataclass

import httpx
from pydantic import ValidationError

from menu_ranker.adapters.menu_api_client import MenuApiClient
from menu_ranker.domain.menus import NO_RECIPE_ID, CompositeIdentity
from menu_ranker.domain.nutrition import RecipeDetail
from menu_ranker.domain.providers import Provider
from menu_ranker.services.enrichment import fetch_recipe_detail

_logger = logging.getLogger(__name__)


class DetailError(Exception):
    """Recipe detail could not be returned."""


class DetailUnavailableError(DetailError):
    """The meal has no recipe detail to fetch."""


class DetailFetchError(DetailError):
    """The recipe endpoint could not be reached or returned an error."""


class DetailDecodeError(DetailError):
    """The recipe endpoint returned a body that could not be decoded."""


@dataclass
class DetailResolver:
    """Fetches full recipe detail for a single selected meal."""

    client: MenuApiClient
    language: str = "fi"

    async def resolve(self, recipe_id: int, provider: Provider) -> RecipeDetail:
        """Return recipe detail or raise a DetailError describing the failure."""
        if recipe_id == NO_RECIPE_ID:
            raise DetailUnavailableError("no detail available")
        identity = CompositeIdentity(recipe_id=recipe_id, provider=provider)
        try:
            return await fetch_recipe_detail(self.client, identity, self.language)
        except httpx.HTTPError as exc:
            _logger.warning(
                "Recipe detail fetch error for %s at %s: %s",
                recipe_id,
                provider.value,
                exc,
            )
            raise DetailFetchError(f"recipe fetch failed: {exc}") from exc
        except (ValidationError, ValueError) as exc:
            _logger.warning(
                "Recipe detail decode error for %s at %s: %s",
                recipe_id,
                provider.value,
                exc,
            )
            raise DetailDecodeError("recipe response could not be decoded") from exc
