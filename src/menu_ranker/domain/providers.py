"""Menu provider registry."""

from dataclasses import dataclass, field
from enum import StrEnum


class Provider(StrEnum):
    """Upstream catalog services that publish day menus and recipes."""

    SEMMA = "semma"
    COMPASS = "compass"


@dataclass(frozen=True)
class ProviderEndpoints:
    """Base URLs for one provider's menu and recipe endpoints."""

    menu_base: str
    recipe_base: str


DEFAULT_ENDPOINTS: dict[Provider, ProviderEndpoints] = {
    Provider.SEMMA: ProviderEndpoints(
        menu_base="https://www.semma.fi/menuapi/day-menus",
        recipe_base="https://www.semma.fi/menuapi/recipes",
    ),
    Provider.COMPASS: ProviderEndpoints(
        menu_base="https://www.compass-group.fi/menuapi/day-menus",
        recipe_base="https://www.compass-group.fi/menuapi/recipes",
    ),
}


@dataclass(frozen=True)
class ProviderRegistry:
    """Static mapping from provider to its endpoints."""

    endpoints: dict[Provider, ProviderEndpoints] = field(
        default_factory=lambda: dict(DEFAULT_ENDPOINTS)
    )

    def menu_url(self, provider: Provider) -> str:
        """Return the day-menu endpoint for a provider."""
        return self.endpoints[provider].menu_base

    def recipe_url(self, provider: Provider, recipe_id: int) -> str:
        """Return the recipe-detail URL for a provider's recipe."""
        return f"{self.endpoints[provider].recipe_base}/{recipe_id}"

    @classmethod
    def with_overrides(
        cls, overrides: dict[Provider, dict[str, str | None]]
    ) -> "ProviderRegistry":
        """Build a registry where non-empty overrides replace default URLs."""
        endpoints: dict[Provider, ProviderEndpoints] = {}
        for provider, defaults in DEFAULT_ENDPOINTS.items():
            values = overrides.get(provider, {})
            endpoints[provider] = ProviderEndpoints(
                menu_base=(values.get("menu_base") or defaults.menu_base).rstrip("/"),
                recipe_base=(
                    values.get("recipe_base") or defaults.recipe_base
                ).rstrip("/"),
            )
        return cls(endpoints=endpoints)


def parse_provider(raw: str) -> Provider | None:
    """Parse a provider name, returning None when it is unknown."""
    try:
        return Provider(raw.strip().lower())
    except ValueError:
        return None
