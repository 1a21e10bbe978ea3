#!/usr/bin/env python3
"""
Validate a menu seed file and print a short summary.

Usage:
    python scripts/check_menus.py [path/to/menus.json]
"""

import sys
import os
from collections import Counter

project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, project_root)

from pydantic import ValidationError

from app.config import settings
from domain.models.database import load_seed_menus
from domain.models.menu import MenuItem


def main(path: str) -> int:
    entries = load_seed_menus(path)

    errors = 0
    names = []
    for i, entry in enumerate(entries, start=1):
        try:
            menu = MenuItem(id=i, **entry)
        except ValidationError as e:
            errors += 1
            print(f"  entry {i}: {e.errors()[0]['msg']}")
            continue
        names.append(menu.name)

    duplicates = [name for name, count in Counter(names).items() if count > 1]
    categories = Counter(entry.get("category", settings.default_category) for entry in entries)

    print(f"Total menus: {len(entries)}")
    print(f"Invalid entries: {errors}")
    print(f"Duplicate names: {len(duplicates)}")
    for name in duplicates:
        print(f"  '{name}'")
    print("Menus per category:")
    for category, count in categories.most_common():
        print(f"  {category}: {count}")

    return 1 if errors or duplicates else 0


if __name__ == "__main__":
    seed_path = sys.argv[1] if len(sys.argv) > 1 else settings.seed_menus_path
    sys.exit(main(seed_path))
