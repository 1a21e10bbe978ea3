"""Menu service - menu catalog management."""

import logging
from typing import List, Optional

from app.config import settings
from app.exceptions import ConflictError, ServiceValidationError
from domain.models.database import InMemoryDatabase
from domain.models.menu import MenuItem
from repositories.menu_repository import MenuRepository

logger = logging.getLogger("menubot.menu")


class MenuService:
    """Business logic for the menu catalog."""

    @staticmethod
    def get_all_menus(db: InMemoryDatabase) -> List[MenuItem]:
        return MenuRepository(db).get_all()

    @staticmethod
    def find_by_name(db: InMemoryDatabase, name: str) -> Optional[MenuItem]:
        return MenuRepository(db).get_by_name(name)

    @staticmethod
    def find_by_category(db: InMemoryDatabase, category: str) -> List[MenuItem]:
        return MenuRepository(db).get_by_category(category)

    @staticmethod
    def search_by_name(db: InMemoryDatabase, keyword: str) -> List[MenuItem]:
        """Menus whose name contains ``keyword``."""
        return MenuRepository(db).search_by_name(keyword)

    @staticmethod
    def save_menu(
        db: InMemoryDatabase,
        name: str,
        category: Optional[str] = None,
        calories: Optional[int] = None,
        spicy_level: Optional[int] = None,
    ) -> MenuItem:
        """
        Add a menu to the catalog.

        Args:
            db: Database
            name: Unique menu name
            category: Category label; defaults to the configured fallback category
            calories: Optional calorie count
            spicy_level: Optional spiciness (0-5)

        Returns:
            Created MenuItem

        Raises:
            ServiceValidationError: If the name is blank or a field is out of range
            ConflictError: If a menu with this name already exists
        """
        name = (name or "").strip()
        if not name:
            raise ServiceValidationError("Menu name must not be blank", code="BLANK_MENU_NAME")
        if calories is not None and calories < 0:
            raise ServiceValidationError("calories must be non-negative", code="INVALID_CALORIES")
        if spicy_level is not None and not 0 <= spicy_level <= 5:
            raise ServiceValidationError("spicy_level must be between 0 and 5", code="INVALID_SPICY_LEVEL")

        menu, created = MenuRepository(db).get_or_create(
            name=name,
            category=category or settings.default_category,
            calories=calories,
            spicy_level=spicy_level,
        )
        if not created:
            raise ConflictError(
                f"Menu '{name}' already exists", details={"name": name}, code="DUPLICATE_MENU"
            )

        logger.info(f"Created menu {menu.id}: {menu.name} ({menu.category})")
        return menu

    @staticmethod
    def get_or_create_menu(db: InMemoryDatabase, name: str) -> MenuItem:
        """
        Get the menu called ``name``, creating it with the default category
        if it does not exist yet.

        Safe under concurrent calls: two requests naming the same new menu
        end up sharing a single catalog entry.
        """
        name = (name or "").strip()
        if not name:
            raise ServiceValidationError("Menu name must not be blank", code="BLANK_MENU_NAME")

        menu, created = MenuRepository(db).get_or_create(
            name=name, category=settings.default_category
        )
        if created:
            logger.info(f"Created menu {menu.id}: {menu.name} ({menu.category})")
        return menu
