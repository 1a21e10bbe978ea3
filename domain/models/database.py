"""
In-memory storage and session management.

Menus and meal records are kept for the lifetime of the process only.
Writes go through a lock so concurrent appends keep ids and order intact.
"""

import json
import logging
import threading
from pathlib import Path
from typing import Iterator, List, Optional, Tuple

from app.config import settings
from domain.models.menu import MealRecord, MenuItem

logger = logging.getLogger("menubot.database")


class InMemoryDatabase:
    """Process-local store for the menu catalog and meal history."""

    def __init__(self):
        self._lock = threading.Lock()
        self._menus: List[MenuItem] = []
        self._records: List[MealRecord] = []
        self._next_menu_id = 1
        self._next_record_id = 1

    @property
    def menus(self) -> List[MenuItem]:
        """Snapshot of the catalog in insertion order"""
        return list(self._menus)

    @property
    def records(self) -> List[MealRecord]:
        """Snapshot of the meal history in insertion order"""
        return list(self._records)

    def add_menu(self, **fields) -> MenuItem:
        with self._lock:
            menu = MenuItem(id=self._next_menu_id, **fields)
            self._menus.append(menu)
            self._next_menu_id += 1
        return menu

    def get_or_add_menu(self, name: str, **fields) -> Tuple[MenuItem, bool]:
        """
        Return the menu called ``name``, adding it first if it is missing.

        Lookup and append share one critical section, so concurrent callers
        never create two menus with the same name.

        Returns:
            (menu, created) tuple
        """
        with self._lock:
            existing = next((m for m in self._menus if m.name == name), None)
            if existing is not None:
                return existing, False
            menu = MenuItem(id=self._next_menu_id, name=name, **fields)
            self._menus.append(menu)
            self._next_menu_id += 1
        return menu, True

    def add_record(self, **fields) -> MealRecord:
        with self._lock:
            record = MealRecord(id=self._next_record_id, **fields)
            self._records.append(record)
            self._next_record_id += 1
        return record

    def clear(self) -> None:
        with self._lock:
            self._menus.clear()
            self._records.clear()
            self._next_menu_id = 1
            self._next_record_id = 1


_database = InMemoryDatabase()


def load_seed_menus(path: Path) -> List[dict]:
    """Read the catalog seed file (a JSON list of menu objects)."""
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    if not isinstance(data, list):
        raise ValueError(f"Seed file {path} must contain a JSON list")
    return data


def init_database(seed_path: Optional[str] = None, db: Optional[InMemoryDatabase] = None) -> InMemoryDatabase:
    """Seed the catalog, skipping names that are already present"""
    db = db or _database
    seed_path = seed_path if seed_path is not None else settings.seed_menus_path
    if not seed_path:
        logger.info("No seed file configured; starting with an empty catalog")
        return db

    path = Path(seed_path)
    if not path.exists():
        logger.warning(f"Seed file {path} not found; starting with an empty catalog")
        return db

    known = {m.name for m in db.menus}
    added = 0
    for entry in load_seed_menus(path):
        if entry.get("name") in known:
            continue
        db.add_menu(
            name=entry["name"],
            category=entry.get("category", settings.default_category),
            calories=entry.get("calories"),
            spicy_level=entry.get("spicy_level"),
        )
        known.add(entry["name"])
        added += 1
    logger.info(f"Seeded {added} menus from {path}")
    return db


def get_db_session() -> Iterator[InMemoryDatabase]:
    """Get the database (for FastAPI dependency injection)"""
    yield _database
