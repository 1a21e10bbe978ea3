"""
Meal message parsing: turn "저녁에 파스타 먹었어" into (DINNER, "파스타").

The menu name is extracted by deleting noise substrings (eating verbs, time
words, particles) and then resolved against the catalog so typos map onto
known menus. Failing to find a name is a normal outcome reported as None.
"""

import logging
import re
from datetime import datetime
from typing import Optional, Sequence, Union

from app.config import MatchingConfig, settings
from domain.models.menu import MenuItem
from domain.schemas.recommendation_schemas import ParsedMeal
from services.meal_period import classify_meal_period
from services.menu_matcher import MenuIndex, resolve_menu

logger = logging.getLogger("menubot.parser")

EATING_VERBS = ("먹었어", "먹었다", "먹음", "드셨어", "드셨다", "드심", "먹을래", "먹자")
TIME_WORDS = ("점심", "저녁", "아침", "오늘", "어제", "내일")
PARTICLES = ("에", "을", "를", "이", "가", "은", "는")

# Applied in this order; each is a plain substring deletion
NOISE_PATTERNS = [
    re.compile("|".join(map(re.escape, EATING_VERBS))),
    re.compile("|".join(map(re.escape, TIME_WORDS))),
    re.compile("|".join(map(re.escape, PARTICLES))),
]

HANGUL_RUN = re.compile(r"[가-힣]{2,}")


def strip_noise(utterance: str) -> str:
    """Delete verb, time and particle substrings and trim whitespace."""
    cleaned = utterance
    for pattern in NOISE_PATTERNS:
        cleaned = pattern.sub("", cleaned)
    return cleaned.strip()


def extract_menu_name(
    utterance: str,
    catalog: Union[MenuIndex, Sequence[MenuItem]] = (),
    config: Optional[MatchingConfig] = None,
) -> Optional[str]:
    """
    Pull a candidate menu name out of an utterance.

    Steps:
    1. Strip noise tokens
    2. Return a catalog name that contains, or is contained in, the cleaned text
    3. Else return the first run of two or more Hangul syllables
    4. Else return the cleaned text itself if it is long enough

    Args:
        utterance: Raw chat text
        catalog: Known menus, checked for a direct match first
        config: Matching settings; defaults to application settings

    Returns:
        Candidate menu name before catalog resolution, or None
    """
    config = config or settings.matching
    cleaned = strip_noise(utterance)
    # An empty remainder would be contained in every catalog name and match
    # the first menu; report nothing instead.
    if not cleaned:
        logger.debug(f"Nothing left of {utterance!r} after removing noise")
        return None

    direct = MenuIndex.of(catalog).find_containing(cleaned)
    if direct is not None:
        logger.debug(f"Direct match found: {direct.name}")
        return direct.name

    match = HANGUL_RUN.search(cleaned)
    if match:
        logger.debug(f"Extracted Korean text: {match.group()}")
        return match.group()

    if len(cleaned) >= config.min_candidate_length:
        return cleaned

    return None


class MealParser:
    """Business logic for the meal recording path."""

    @staticmethod
    def parse_meal_message(
        utterance: str,
        catalog: Sequence[MenuItem],
        now: Optional[datetime] = None,
        config: Optional[MatchingConfig] = None,
    ) -> Optional[ParsedMeal]:
        """
        Extract meal period and menu name from a chat message.

        The extracted name is normalized onto a known menu when one matches;
        otherwise the raw candidate is kept so the caller can create a menu.

        Args:
            utterance: Raw chat text
            catalog: Known menus
            now: Current time used for the period fallback
            config: Matching settings; defaults to application settings

        Returns:
            ParsedMeal, or None when no menu name could be identified
        """
        logger.debug(f"Parsing message: {utterance}")
        config = config or settings.matching
        index = MenuIndex(catalog)

        meal_period = classify_meal_period(utterance, now=now, config=config)

        candidate = extract_menu_name(utterance, index, config=config)
        if candidate is None:
            logger.debug("Could not extract menu name from message")
            return None

        matched = resolve_menu(candidate, index, config=config)
        menu_name = matched.name if matched is not None else candidate

        logger.debug(f"Parsed - MealPeriod: {meal_period.value}, Menu: {menu_name}")
        return ParsedMeal(meal_period=meal_period, menu_name=menu_name)
