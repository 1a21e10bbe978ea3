"""Lunch/dinner classification of chat utterances."""

import logging
from datetime import datetime, time
from typing import Optional, Union

from app.config import MatchingConfig, settings
from domain.enums import MealPeriod

logger = logging.getLogger("menubot.meal_period")

LUNCH_KEYWORDS = ("점심", "런치")
DINNER_KEYWORDS = ("저녁", "디너")


def classify_meal_period(
    utterance: str,
    now: Union[datetime, time, None] = None,
    config: Optional[MatchingConfig] = None,
) -> MealPeriod:
    """
    Decide whether an utterance refers to lunch or dinner.

    Keywords win over the clock: a lunch keyword means LUNCH, otherwise a
    dinner keyword means DINNER. Without keywords, hours in
    [lunch_start_hour, lunch_end_hour) are LUNCH and everything else DINNER.

    Args:
        utterance: Raw chat text
        now: Current time of day (datetime or time); defaults to the local clock
        config: Matching settings; defaults to application settings

    Returns:
        MealPeriod.LUNCH or MealPeriod.DINNER
    """
    config = config or settings.matching

    if any(keyword in utterance for keyword in LUNCH_KEYWORDS):
        return MealPeriod.LUNCH
    if any(keyword in utterance for keyword in DINNER_KEYWORDS):
        return MealPeriod.DINNER

    hour = (now or datetime.now()).hour
    if config.lunch_start_hour <= hour < config.lunch_end_hour:
        period = MealPeriod.LUNCH
    else:
        period = MealPeriod.DINNER
    logger.debug(f"No period keyword in {utterance!r}; hour {hour} -> {period.value}")
    return period
