"""Menu domain models."""

from dataclasses import dataclass

from menu_ranker.domain.nutrition import NutrientStats
from menu_ranker.domain.providers import Provider

NO_RECIPE_ID = 0


@dataclass(frozen=True)
class CompositeIdentity:
    """Recipe id scoped to its provider.

    Recipe ids are only unique within one provider's catalog.
    """

    recipe_id: int
    provider: Provider


@dataclass(frozen=True)
class AggregatedMeal:
    """A meal served today at one restaurant."""

    id: str
    name: str
    recipe_id: int
    diets: tuple[str, ...]
    icon_url: str
    restaurant_name: str
    provider: Provider

    @property
    def identity(self) -> CompositeIdentity:
        return CompositeIdentity(recipe_id=self.recipe_id, provider=self.provider)

    @property
    def has_recipe(self) -> bool:
        return self.recipe_id != NO_RECIPE_ID


def synthetic_meal_id(recipe_id: int, name: str, provider: Provider) -> str:
    """Build the display identity for an aggregated meal."""
    return f"{recipe_id}-{name}-{provider.value}"


@dataclass(frozen=True)
class PipelineRun:
    """Result of one aggregation run."""

    date: str
    language: str
    meals: list[AggregatedMeal]
    stats: dict[CompositeIdentity, NutrientStats]
    ranked: list[AggregatedMeal]

    def stats_for(self, meal: AggregatedMeal) -> NutrientStats | None:
        """Return nutrient stats for a meal, if they were resolved."""
        return self.stats.get(meal.identity)
