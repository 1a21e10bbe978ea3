"""
Domain models package - menu catalog and meal history entities.
"""

from domain.models.database import (
    InMemoryDatabase,
    init_database,
    get_db_session,
    load_seed_menus,
)
from domain.models.menu import MenuItem, MealRecord, UNCATEGORIZED

__all__ = [
    # Database
    "InMemoryDatabase",
    "init_database",
    "get_db_session",
    "load_seed_menus",
    # Entities
    "MenuItem",
    "MealRecord",
    "UNCATEGORIZED",
]
