"""Repository for the append-only meal history"""

from collections import Counter
from datetime import datetime
from typing import List, Optional, Tuple

from domain.enums import MealPeriod
from domain.models.database import InMemoryDatabase
from domain.models.menu import MealRecord
from repositories.base import BaseRepository


class MealHistoryRepository(BaseRepository[MealRecord]):
    """Repository for meal record access"""

    def __init__(self, db: InMemoryDatabase):
        super().__init__(db, MealRecord)

    def _rows(self) -> List[MealRecord]:
        return self.db.records

    def create(
        self,
        user_id: str,
        menu_id: int,
        meal_period: MealPeriod,
        eaten_at: datetime,
        rating: Optional[int] = None,
    ) -> MealRecord:
        """
        Append a meal record.

        Args:
            user_id: Chat user identifier
            menu_id: Id of an existing menu
            meal_period: LUNCH or DINNER
            eaten_at: When the meal was eaten
            rating: Optional satisfaction rating (1-5)

        Returns:
            Created MealRecord
        """
        return self.db.add_record(
            user_id=user_id,
            menu_id=menu_id,
            meal_period=meal_period,
            eaten_at=eaten_at,
            rating=rating,
        )

    def get_by_user_id(self, user_id: str) -> List[MealRecord]:
        """All records of a user in insertion order"""
        return [r for r in self._rows() if r.user_id == user_id]

    def get_by_user_and_period(self, user_id: str, meal_period: MealPeriod) -> List[MealRecord]:
        return [
            r for r in self._rows() if r.user_id == user_id and r.meal_period == meal_period
        ]

    def get_all_by_user_desc(self, user_id: str) -> List[MealRecord]:
        """All records of a user, newest first"""
        return sorted(self.get_by_user_id(user_id), key=lambda r: r.eaten_at, reverse=True)

    def get_recent(self, user_id: str, since: datetime) -> List[MealRecord]:
        """Records eaten at or after ``since``, newest first"""
        return [r for r in self.get_all_by_user_desc(user_id) if r.eaten_at >= since]

    def get_most_eaten(self, user_id: str) -> List[Tuple[int, int]]:
        """(menu_id, count) pairs, most frequently eaten first"""
        counts = Counter(r.menu_id for r in self.get_by_user_id(user_id))
        return counts.most_common()
