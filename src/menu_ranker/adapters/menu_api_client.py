"""Provider menu API client."""

from dataclasses import dataclass
from typing import Protocol

import httpx

from menu_ranker.domain.providers import Provider, ProviderRegistry


class MenuApiClient(Protocol):
    """Interface for provider menu API interactions."""

    async def get_day_menu(
        self, provider: Provider, cost_center: str, date: str, language: str
    ) -> dict[str, object]:
        """Fetch a restaurant's day menu and return raw API data."""

    async def get_recipe(
        self, provider: Provider, recipe_id: int, language: str
    ) -> dict[str, object]:
        """Fetch a recipe by id and return raw API data."""


@dataclass
class HttpxMenuApiClient(MenuApiClient):
    """HTTPX-backed provider menu client."""

    registry: ProviderRegistry
    http_client: httpx.AsyncClient
    timeout_seconds: float = 10.0

    @classmethod
    def create(
        cls, registry: ProviderRegistry, timeout_seconds: float = 10.0
    ) -> "HttpxMenuApiClient":
        """Create a menu client with a managed httpx session."""
        return cls(
            registry=registry,
            http_client=httpx.AsyncClient(),
            timeout_seconds=timeout_seconds,
        )

    async def get_day_menu(
        self, provider: Provider, cost_center: str, date: str, language: str
    ) -> dict[str, object]:
        """Fetch a day menu for a cost center."""
        response = await self.http_client.get(
            self.registry.menu_url(provider),
            params={"costCenter": cost_center, "date": date, "language": language},
            timeout=self.timeout_seconds,
        )
        response.raise_for_status()
        return response.json()

    async def get_recipe(
        self, provider: Provider, recipe_id: int, language: str
    ) -> dict[str, object]:
        """Fetch recipe detail by id."""
        response = await self.http_client.get(
            self.registry.recipe_url(provider, recipe_id),
            params={"language": language},
            timeout=self.timeout_seconds,
        )
        response.raise_for_status()
        return response.json()

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.http_client.aclose()


def status_code_from_exception(exc: Exception) -> str:
    """Extract HTTP status code from an exception, if available."""
    response = getattr(exc, "response", None)
    status_code = getattr(response, "status_code", None)
    if isinstance(status_code, int):
        return str(status_code)
    return "n/a"
