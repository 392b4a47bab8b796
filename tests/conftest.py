"""Shared test fixtures."""

import asyncio
from dataclasses import dataclass, field

import pytest

from menu_ranker.adapters.menu_api_client import MenuApiClient
from menu_ranker.config import Settings
from menu_ranker.containers import AppContainer, build_registry, build_services
from menu_ranker.domain.menus import AggregatedMeal, synthetic_meal_id
from menu_ranker.domain.providers import Provider


def meal_payload(name: str, recipe_id: int, diets: list[str] | None = None) -> dict:
    return {
        "name": name,
        "recipeId": recipe_id,
        "diets": diets or [],
        "iconUrl": f"https://icons.test/{recipe_id}.png",
    }


def menu_payload(*packages: list[dict], date: str = "2025-10-29") -> dict:
    return {
        "dayOfWeek": "Keskiviikko",
        "date": date,
        "menuPackages": [
            {
                "sortOrder": index,
                "name": f"Linjasto {index}",
                "price": "2,95 €",
                "meals": meals,
            }
            for index, meals in enumerate(packages, start=1)
        ],
        "html": None,
        "isManualMenu": False,
    }


def recipe_payload(
    recipe_id: int,
    kcal: float | None = None,
    protein: float | None = None,
    extra: list[dict] | None = None,
) -> dict:
    values: list[dict] = []
    if kcal is not None:
        values.append({"name": "EnergyKcal", "amount": kcal, "unit": "kcal"})
    if protein is not None:
        values.append({"name": "Protein", "amount": protein, "unit": "g"})
    values.extend(extra or [])
    return {
        "recipeId": recipe_id,
        "name": f"Recipe {recipe_id}",
        "ingredientsCleaned": "Kana, riisi, suola",
        "lastModified": "2025-10-20T08:00:00",
        "nutritionalValues": values,
        "kgCO2ePer100g": 0.12,
        "diets": "L, G",
    }


def make_meal(
    name: str,
    recipe_id: int,
    provider: Provider = Provider.SEMMA,
    restaurant_name: str = "Piato",
) -> AggregatedMeal:
    return AggregatedMeal(
        id=synthetic_meal_id(recipe_id, name, provider),
        name=name,
        recipe_id=recipe_id,
        diets=(),
        icon_url="",
        restaurant_name=restaurant_name,
        provider=provider,
    )


@dataclass
class FakeMenuApiClient(MenuApiClient):
    """Fake menu client serving in-memory payloads.

    A stored exception is raised instead of returned.
    """

    menus: dict[tuple[Provider, str], object] = field(default_factory=dict)
    recipes: dict[tuple[Provider, int], object] = field(default_factory=dict)
    menu_calls: list[tuple[Provider, str, str, str]] = field(default_factory=list)
    recipe_calls: list[tuple[Provider, int, str]] = field(default_factory=list)
    delay_seconds: float = 0.0
    in_flight: int = 0
    max_in_flight: int = 0

    async def get_day_menu(
        self, provider: Provider, cost_center: str, date: str, language: str
    ) -> dict[str, object]:
        self.menu_calls.append((provider, cost_center, date, language))
        return await self._respond(self.menus.get((provider, cost_center), {}))

    async def get_recipe(
        self, provider: Provider, recipe_id: int, language: str
    ) -> dict[str, object]:
        self.recipe_calls.append((provider, recipe_id, language))
        return await self._respond(self.recipes.get((provider, recipe_id), {}))

    async def _respond(self, value: object) -> dict[str, object]:
        self.in_flight += 1
        self.max_in_flight = max(self.max_in_flight, self.in_flight)
        try:
            await asyncio.sleep(self.delay_seconds)
        finally:
            self.in_flight -= 1
        if isinstance(value, Exception):
            raise value
        return value


@pytest.fixture
def settings() -> Settings:
    return Settings(
        menu_language="fi",
        menu_timezone="Europe/Helsinki",
        request_timeout_seconds=5.0,
        max_concurrent_requests=4,
    )


@pytest.fixture
def menu_client() -> FakeMenuApiClient:
    return FakeMenuApiClient()


@pytest.fixture
def container(settings: Settings, menu_client: FakeMenuApiClient) -> AppContainer:
    pipeline, detail_resolver = build_services(settings, menu_client)

    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=settings,
        registry=build_registry(settings),
        menu_client=menu_client,
        pipeline=pipeline,
        detail_resolver=detail_resolver,
        close_resources=close_resources,
    )
