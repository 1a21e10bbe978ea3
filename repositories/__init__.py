"""
Repositories package - Data access layer.
"""

from repositories.base import BaseRepository
from repositories.menu_repository import MenuRepository
from repositories.meal_history_repository import MealHistoryRepository

__all__ = [
    "BaseRepository",
    "MenuRepository",
    "MealHistoryRepository",
]
