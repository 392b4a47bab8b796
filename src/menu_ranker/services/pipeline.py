"""End-to-end menu ranking pipeline."""

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from menu_ranker.config import today_in
from menu_ranker.domain.menus import PipelineRun
from menu_ranker.domain.restaurants import DEFAULT_RESTAURANTS, RestaurantDescriptor
from menu_ranker.services.enrichment import NutrientEnricher
from menu_ranker.services.menus import MenuAggregator
from menu_ranker.services.ranking import rank_meals

_logger = logging.getLogger(__name__)


@dataclass
class MenuPipeline:
    """Runs aggregation, enrichment and ranking for one date.

    Each run returns a fresh PipelineRun; the pipeline itself keeps no
    per-run state, so cancelling the awaiting caller drops in-flight results.
    """

    aggregator: MenuAggregator
    enricher: NutrientEnricher
    restaurants: Sequence[RestaurantDescriptor] = DEFAULT_RESTAURANTS
    timezone: str = "Europe/Helsinki"

    async def run(
        self,
        date: str | None = None,
        restaurants: Sequence[RestaurantDescriptor] | None = None,
    ) -> PipelineRun:
        """Fetch, enrich and rank the menus of every restaurant for a date."""
        menu_date = date or today_in(self.timezone)
        selected = self.restaurants if restaurants is None else restaurants
        meals = await self.aggregator.aggregate(selected, menu_date)
        stats = await self.enricher.enrich(meals)
        ranked = rank_meals(meals, stats)
        _logger.info(
            "Pipeline run: date=%s meals=%s resolved=%s",
            menu_date,
            len(meals),
            len(stats),
        )
        return PipelineRun(
            date=menu_date,
            language=self.aggregator.language,
            meals=meals,
            stats=stats,
            ranked=ranked,
        )
