"""
Domain enums for MenuBot application.
Contains all enumeration types used across the domain models.
"""

import enum


class MealPeriod(str, enum.Enum):
    """Which daily meal an utterance or record refers to"""

    LUNCH = "LUNCH"
    DINNER = "DINNER"

    @property
    def description(self) -> str:
        """Korean label used in chat replies"""
        return _PERIOD_DESCRIPTIONS[self]


_PERIOD_DESCRIPTIONS = {
    MealPeriod.LUNCH: "점심",
    MealPeriod.DINNER: "저녁",
}
