"""
Resolve free text against the known menu catalog.

Resolution order, first hit wins:
1. exact name equality
2. containment in either direction, in catalog order
3. smallest edit distance, accepted up to ``max_edit_distance``
   (ties go to the earliest catalog item)
"""

import logging
from typing import Dict, Iterator, List, Optional, Sequence, Union

from app.config import MatchingConfig, settings
from domain.models.menu import MenuItem
from services.edit_distance import edit_distance

logger = logging.getLogger("menubot.matcher")


class MenuIndex:
    """Catalog snapshot with a name lookup, built once per call."""

    def __init__(self, catalog: Sequence[MenuItem]):
        self.items: List[MenuItem] = list(catalog)
        self.by_name: Dict[str, MenuItem] = {}
        self.by_id: Dict[int, MenuItem] = {}
        for item in self.items:
            # setdefault keeps the first occurrence, matching catalog order
            self.by_name.setdefault(item.name, item)
            self.by_id.setdefault(item.id, item)

    @classmethod
    def of(cls, catalog: Union["MenuIndex", Sequence[MenuItem]]) -> "MenuIndex":
        if isinstance(catalog, MenuIndex):
            return catalog
        return cls(catalog)

    def __iter__(self) -> Iterator[MenuItem]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)

    def find_containing(self, text: str) -> Optional[MenuItem]:
        """First item whose name contains ``text`` or is contained in it."""
        for item in self.items:
            if item.name in text or text in item.name:
                return item
        return None


def resolve_menu(
    candidate_text: str,
    catalog: Union[MenuIndex, Sequence[MenuItem]],
    config: Optional[MatchingConfig] = None,
) -> Optional[MenuItem]:
    """
    Find the catalog item best matching ``candidate_text``.

    Args:
        candidate_text: Menu name extracted from user input
        catalog: Known menus (sequence or prebuilt MenuIndex)
        config: Matching settings; defaults to application settings

    Returns:
        Matching MenuItem, or None when nothing is close enough
    """
    config = config or settings.matching
    if not candidate_text:
        return None

    index = MenuIndex.of(catalog)

    exact = index.by_name.get(candidate_text)
    if exact is not None:
        return exact

    partial = index.find_containing(candidate_text)
    if partial is not None:
        logger.debug(f"Partial match found: {partial.name} for input: {candidate_text}")
        return partial

    best: Optional[MenuItem] = None
    best_distance = config.max_edit_distance + 1
    for item in index:
        distance = edit_distance(candidate_text, item.name)
        if distance < best_distance:
            best, best_distance = item, distance

    if best is not None:
        logger.debug(
            f"Fuzzy match found: {best.name} (distance: {best_distance}) for input: {candidate_text}"
        )
    return best
