"""Ranking of meals by kcal per gram of protein."""

from collections.abc import Mapping, Sequence

from menu_ranker.domain.menus import AggregatedMeal, CompositeIdentity
from menu_ranker.domain.nutrition import NutrientStats


def rank_meals(
    meals: Sequence[AggregatedMeal],
    stats: Mapping[CompositeIdentity, NutrientStats],
) -> list[AggregatedMeal]:
    """Order meals by ascending ratio, unrankable meals last.

    Ranked meals keep their input order on ties. Meals without stats or with a
    non-finite ratio keep their input order in the tail.
    """
    ranked: list[AggregatedMeal] = []
    unranked: list[AggregatedMeal] = []
    for meal in meals:
        meal_stats = stats.get(meal.identity)
        if meal_stats is not None and meal_stats.is_rankable:
            ranked.append(meal)
        else:
            unranked.append(meal)
    ranked.sort(key=lambda meal: stats[meal.identity].ratio)
    return ranked + unranked
