"""
Recommendation engine: rank catalog menus for one user's history snapshot.

Read-only over its inputs. The only non-determinism is the injected random
source (score jitter and fallback sampling).
"""

import logging
from collections import Counter, defaultdict
from datetime import datetime, timedelta
from typing import Dict, List, Optional, Sequence

from app.config import RecommendationConfig, settings
from app.exceptions import ServiceValidationError
from domain.models.menu import MealRecord, MenuItem
from domain.schemas.recommendation_schemas import RecommendationCandidate
from services.menu_matcher import MenuIndex
from services.randomness import RandomSource, default_random_source
from services.scoring import RecommendationScorer

logger = logging.getLogger("menubot.recommendations")

FALLBACK_REASON = "첫 추천이에요! 맛있게 드세요 😊"


def _to_candidate(menu: MenuItem, score: float, reason: str) -> RecommendationCandidate:
    return RecommendationCandidate(
        menu_name=menu.name,
        category=menu.category,
        calories=menu.calories,
        spicy_level=menu.spicy_level,
        score=score,
        reason=reason,
    )


def category_frequency(history: Sequence[MealRecord], index: MenuIndex) -> Counter:
    """Count history records per menu category"""
    counts: Counter = Counter()
    for record in history:
        menu = index.by_id.get(record.menu_id)
        if menu is not None:
            counts[menu.category] += 1
    return counts


def average_ratings(history: Sequence[MealRecord]) -> Dict[int, float]:
    """Mean rating per menu id, over rated records only"""
    ratings: Dict[int, List[int]] = defaultdict(list)
    for record in history:
        if record.rating is not None:
            ratings[record.menu_id].append(record.rating)
    return {menu_id: sum(values) / len(values) for menu_id, values in ratings.items()}


class RecommendationEngine:
    """Builds ranked recommendations from history and catalog snapshots."""

    def __init__(
        self,
        config: Optional[RecommendationConfig] = None,
        rng: Optional[RandomSource] = None,
    ):
        self.config = config or settings.recommendation
        self.rng = rng or default_random_source()
        self.scorer = RecommendationScorer(self.config, self.rng)

    def recommend(
        self,
        history: Sequence[MealRecord],
        catalog: Sequence[MenuItem],
        count: int,
        now: Optional[datetime] = None,
    ) -> List[RecommendationCandidate]:
        """
        Recommend up to ``count`` menus.

        Algorithm:
        1. Empty catalog -> empty list
        2. Empty history -> random picks from the catalog (repeats allowed)
        3. Otherwise skip menus eaten inside the exclusion window, score the
           rest, sort by score descending and keep the top ``count``

        Args:
            history: The user's meal records
            catalog: All known menus
            count: Maximum number of recommendations (positive)
            now: Reference time; defaults to the current local time

        Returns:
            Candidates ordered by descending score

        Raises:
            ServiceValidationError: If count is not a positive integer
        """
        if isinstance(count, bool) or not isinstance(count, int) or count < 1:
            raise ServiceValidationError(
                f"count must be a positive integer, got {count!r}",
                code="INVALID_COUNT",
            )

        if not catalog:
            logger.warning("No menus available for recommendation")
            return []

        if not history:
            return self._random_recommendations(catalog, count)

        now = now or datetime.now()
        index = MenuIndex(catalog)

        window_start = now - timedelta(days=self.config.exclusion_window_days)
        recent_menu_ids = {r.menu_id for r in history if r.eaten_at > window_start}

        frequency = category_frequency(history, index)
        ratings = average_ratings(history)

        scored = []
        for menu in index:
            if menu.id in recent_menu_ids:
                continue
            score, reason = self.scorer.score(menu, history, frequency, ratings, now)
            scored.append(_to_candidate(menu, score, reason))

        scored.sort(key=lambda c: c.score, reverse=True)
        top = scored[:count]

        logger.debug(
            f"Scored {len(scored)} menus, excluded {len(recent_menu_ids)} recent; "
            f"returning {len(top)} (scores: {[round(c.score, 1) for c in top]})"
        )
        return top

    def _random_recommendations(
        self, catalog: Sequence[MenuItem], count: int
    ) -> List[RecommendationCandidate]:
        """Uniform picks with replacement for users without history"""
        picks = [
            _to_candidate(self.rng.choice(catalog), self.config.fallback_score, FALLBACK_REASON)
            for _ in range(min(count, len(catalog)))
        ]
        logger.debug(f"No history found, returning {len(picks)} random recommendations")
        return picks
