"""Repository for the menu catalog"""

from typing import List, Optional, Tuple

from domain.models.database import InMemoryDatabase
from domain.models.menu import MenuItem
from repositories.base import BaseRepository


class MenuRepository(BaseRepository[MenuItem]):
    """Repository for menu catalog access"""

    def __init__(self, db: InMemoryDatabase):
        super().__init__(db, MenuItem)

    def _rows(self) -> List[MenuItem]:
        return self.db.menus

    def get_by_name(self, name: str) -> Optional[MenuItem]:
        return next((m for m in self._rows() if m.name == name), None)

    def get_by_category(self, category: str) -> List[MenuItem]:
        return [m for m in self._rows() if m.category == category]

    def search_by_name(self, keyword: str) -> List[MenuItem]:
        """Menus whose name contains the keyword"""
        return [m for m in self._rows() if keyword in m.name]

    def create(
        self,
        name: str,
        category: str,
        calories: Optional[int] = None,
        spicy_level: Optional[int] = None,
    ) -> MenuItem:
        """Add a menu to the catalog. Name uniqueness is checked by the service."""
        return self.db.add_menu(
            name=name, category=category, calories=calories, spicy_level=spicy_level
        )

    def get_or_create(
        self,
        name: str,
        category: str,
        calories: Optional[int] = None,
        spicy_level: Optional[int] = None,
    ) -> Tuple[MenuItem, bool]:
        """
        Get the menu with this name, or create it atomically.

        Returns:
            (menu, created) tuple; ``created`` is False when the name existed
        """
        return self.db.get_or_add_menu(
            name, category=category, calories=calories, spicy_level=spicy_level
        )
