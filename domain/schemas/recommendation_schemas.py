"""Pydantic schemas produced by the recommendation and meal parsing paths."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from domain.enums import MealPeriod


class RecommendationCandidate(BaseModel):
    """A scored menu suggestion. Built fresh per call, never stored."""

    menu_name: str
    category: str
    calories: Optional[int] = None
    spicy_level: Optional[int] = None
    score: float
    reason: str = Field(..., description="Human-readable explanation of the score")


class ParsedMeal(BaseModel):
    """Meal period and resolved menu name extracted from an utterance."""

    meal_period: MealPeriod
    menu_name: str


class MealHistoryEntry(BaseModel):
    """A meal record joined with its menu, for history replies."""

    menu_name: str
    category: str
    meal_period: MealPeriod
    eaten_at: datetime
    rating: Optional[int] = None
