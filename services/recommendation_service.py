"""Recommendation service for MenuBot: history-aware recommendations and meal logging."""

import logging
from datetime import datetime, timedelta
from typing import List, Optional, Tuple

from app.config import RecommendationConfig
from app.exceptions import ServiceValidationError
from domain.enums import MealPeriod
from domain.models.database import InMemoryDatabase
from domain.models.menu import MealRecord, MenuItem
from domain.schemas.recommendation_schemas import MealHistoryEntry, RecommendationCandidate
from repositories.meal_history_repository import MealHistoryRepository
from repositories.menu_repository import MenuRepository
from services.menu_service import MenuService
from services.randomness import RandomSource
from services.recommendation_engine import RecommendationEngine

logger = logging.getLogger("menubot.recommendations")


class RecommendationService:
    """Business logic for menu recommendations and meal history."""

    @staticmethod
    def recommend_menus(
        db: InMemoryDatabase,
        user_id: str,
        count: int,
        now: Optional[datetime] = None,
        rng: Optional[RandomSource] = None,
        config: Optional[RecommendationConfig] = None,
    ) -> List[RecommendationCandidate]:
        """
        Recommend menus for a user from their stored history.

        Args:
            db: Database
            user_id: Chat user identifier
            count: Maximum number of recommendations
            now: Reference time; defaults to the current local time
            rng: Random source for jitter and fallback picks
            config: Scoring settings; defaults to application settings

        Returns:
            Candidates ordered by descending score
        """
        logger.info(f"Recommending {count} menus for user {user_id}")

        history = MealHistoryRepository(db).get_by_user_id(user_id)
        catalog = MenuRepository(db).get_all()
        logger.debug(f"Found {len(catalog)} menus and {len(history)} history records")

        engine = RecommendationEngine(config=config, rng=rng)
        recommendations = engine.recommend(history, catalog, count, now=now)

        logger.info(f"Returning {len(recommendations)} recommendations for user {user_id}")
        return recommendations

    @staticmethod
    def record_meal(
        db: InMemoryDatabase,
        user_id: str,
        menu_name: str,
        meal_period: MealPeriod,
        rating: Optional[int] = None,
        now: Optional[datetime] = None,
    ) -> Tuple[MealRecord, MenuItem]:
        """
        Record that a user ate a menu, creating the menu if it is unknown.

        Args:
            db: Database
            user_id: Chat user identifier
            menu_name: Resolved menu name
            meal_period: LUNCH or DINNER
            rating: Optional satisfaction rating (1-5)
            now: Timestamp of the meal; defaults to the current local time

        Returns:
            (created record, its menu)

        Raises:
            ServiceValidationError: If the rating is outside 1-5 or the name is blank
        """
        if rating is not None and not 1 <= rating <= 5:
            raise ServiceValidationError(
                "rating must be between 1 and 5", details={"rating": rating}, code="INVALID_RATING"
            )

        logger.info(f"Recording meal - user: {user_id}, menu: {menu_name}, period: {meal_period.value}")

        menu = MenuService.get_or_create_menu(db, menu_name)

        record = MealHistoryRepository(db).create(
            user_id=user_id,
            menu_id=menu.id,
            meal_period=meal_period,
            eaten_at=now or datetime.now(),
            rating=rating,
        )
        return record, menu

    @staticmethod
    def get_recent_meals(
        db: InMemoryDatabase, user_id: str, days: int, now: Optional[datetime] = None
    ) -> List[MealHistoryEntry]:
        """Meals from the last ``days`` days, newest first."""
        since = (now or datetime.now()) - timedelta(days=days)
        records = MealHistoryRepository(db).get_recent(user_id, since)
        return RecommendationService._join_menus(db, records)

    @staticmethod
    def get_most_eaten_menus(db: InMemoryDatabase, user_id: str) -> List[Tuple[MenuItem, int]]:
        """(menu, times eaten) pairs, most frequent first."""
        menu_repo = MenuRepository(db)
        result = []
        for menu_id, count in MealHistoryRepository(db).get_most_eaten(user_id):
            menu = menu_repo.get_by_id(menu_id)
            if menu is not None:
                result.append((menu, count))
        return result

    @staticmethod
    def _join_menus(db: InMemoryDatabase, records: List[MealRecord]) -> List[MealHistoryEntry]:
        menus = {m.id: m for m in MenuRepository(db).get_all()}
        entries = []
        for record in records:
            menu = menus.get(record.menu_id)
            if menu is None:
                logger.warning(f"Meal record {record.id} references unknown menu {record.menu_id}")
                continue
            entries.append(
                MealHistoryEntry(
                    menu_name=menu.name,
                    category=menu.category,
                    meal_period=record.meal_period,
                    eaten_at=record.eaten_at,
                    rating=record.rating,
                )
            )
        return entries
