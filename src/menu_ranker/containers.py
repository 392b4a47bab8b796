"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from menu_ranker.adapters.menu_api_client import HttpxMenuApiClient, MenuApiClient
from menu_ranker.config import Settings
from menu_ranker.domain.providers import Provider, ProviderRegistry
from menu_ranker.domain.restaurants import DEFAULT_RESTAURANTS
from menu_ranker.services.details import DetailResolver
from menu_ranker.services.enrichment import NutrientEnricher
from menu_ranker.services.menus import MenuAggregator
from menu_ranker.services.pipeline import MenuPipeline


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    registry: ProviderRegistry
    menu_client: MenuApiClient
    pipeline: MenuPipeline
    detail_resolver: DetailResolver
    close_resources: Callable[[], Awaitable[None]]


def build_registry(settings: Settings) -> ProviderRegistry:
    """Create the provider registry, applying any configured URL overrides."""
    return ProviderRegistry.with_overrides(
        {
            Provider.SEMMA: {
                "menu_base": settings.semma_menu_base_url,
                "recipe_base": settings.semma_recipe_base_url,
            },
            Provider.COMPASS: {
                "menu_base": settings.compass_menu_base_url,
                "recipe_base": settings.compass_recipe_base_url,
            },
        }
    )


def build_services(
    settings: Settings, menu_client: MenuApiClient
) -> tuple[MenuPipeline, DetailResolver]:
    """Create the pipeline and detail resolver around a menu client."""
    aggregator = MenuAggregator(
        client=menu_client,
        language=settings.menu_language,
        max_concurrent_requests=settings.max_concurrent_requests,
    )
    enricher = NutrientEnricher(
        client=menu_client,
        language=settings.menu_language,
        max_concurrent_requests=settings.max_concurrent_requests,
    )
    pipeline = MenuPipeline(
        aggregator=aggregator,
        enricher=enricher,
        restaurants=DEFAULT_RESTAURANTS,
        timezone=settings.menu_timezone,
    )
    detail_resolver = DetailResolver(
        client=menu_client, language=settings.menu_language
    )
    return pipeline, detail_resolver


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    registry = build_registry(resolved_settings)
    menu_client = HttpxMenuApiClient.create(
        registry=registry,
        timeout_seconds=resolved_settings.request_timeout_seconds,
    )
    pipeline, detail_resolver = build_services(resolved_settings, menu_client)

    async def close_resources() -> None:
        await menu_client.close()

    return AppContainer(
        settings=resolved_settings,
        registry=registry,
        menu_client=menu_client,
        pipeline=pipeline,
        detail_resolver=detail_resolver,
        close_resources=close_resources,
    )
