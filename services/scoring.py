"""
Recommendation scoring for a single candidate menu.

Score components (all additive, no normalization):
- Category affinity: share of history in the menu's category * category_weight
- Rating affinity: average rating / 5 * rating_weight
- Novelty: flat novelty_bonus for never-eaten menus, otherwise a smaller
  bonus once the menu has not been eaten for unseen_days / long_unseen_days
- Time of day: light menus at lunch, hearty menus at dinner
- Jitter: uniform random value in [0, jitter_max)

The jitter is deliberate so repeated requests do not always return the same
ordering. Pass a fixed random source to make scores reproducible.
"""

import logging
from datetime import datetime
from typing import List, Mapping, Optional, Sequence, Tuple

from app.config import RecommendationConfig, settings
from domain.models.menu import MealRecord, MenuItem
from services.randomness import RandomSource, default_random_source

logger = logging.getLogger("menubot.scoring")

DEFAULT_REASON = "맛있게 드세요! 😊"


class RecommendationScorer:
    """Computes the composite score and reason text for one menu."""

    def __init__(
        self,
        config: Optional[RecommendationConfig] = None,
        rng: Optional[RandomSource] = None,
    ):
        self.config = config or settings.recommendation
        self.rng = rng or default_random_source()

    def score(
        self,
        candidate: MenuItem,
        history: Sequence[MealRecord],
        category_frequency: Mapping[str, int],
        avg_rating_by_menu_id: Mapping[int, float],
        now: datetime,
    ) -> Tuple[float, str]:
        """
        Score a candidate menu against the user's history.

        Args:
            candidate: Menu being scored
            history: The user's meal records
            category_frequency: Record count per category over the history
            avg_rating_by_menu_id: Mean rating per menu id (rated menus only)
            now: Reference time for staleness and time-of-day checks

        Returns:
            (score, reason) tuple
        """
        cfg = self.config
        score = 0.0
        reasons: List[str] = []

        # Category affinity
        category_count = category_frequency.get(candidate.category, 0)
        score += (category_count / max(1, len(history))) * cfg.category_weight
        if category_count > 0:
            reasons.append(f"{candidate.category} 자주 드셨네요")

        # Rating affinity; a missing rating is no signal, not zero
        avg_rating = avg_rating_by_menu_id.get(candidate.id)
        if avg_rating is not None:
            score += (avg_rating / 5.0) * cfg.rating_weight
            reasons.append(f"평점 {avg_rating:.1f}점")

        # Novelty / staleness
        last_eaten = max(
            (r.eaten_at for r in history if r.menu_id == candidate.id),
            default=None,
        )
        if last_eaten is None:
            score += cfg.novelty_bonus
            reasons.append("새로운 메뉴 도전!")
        else:
            days_since = (now.date() - last_eaten.date()).days
            if days_since > cfg.long_unseen_days:
                score += cfg.long_unseen_bonus
                reasons.append(f"{days_since}일만에 추천")
            elif days_since > cfg.unseen_days:
                score += cfg.unseen_bonus

        # Time-of-day fit
        if candidate.calories is not None:
            hour = now.hour
            if (
                cfg.lunch_start_hour <= hour < cfg.lunch_end_hour
                and candidate.calories < cfg.calorie_threshold
            ):
                score += cfg.time_of_day_bonus
                reasons.append("가벼운 점심")
            elif (
                cfg.dinner_start_hour <= hour < cfg.dinner_end_hour
                and candidate.calories > cfg.calorie_threshold
            ):
                score += cfg.time_of_day_bonus
                reasons.append("든든한 저녁")

        score += self.rng.random() * cfg.jitter_max

        reason = " ".join(reasons).strip() or DEFAULT_REASON
        return score, reason
