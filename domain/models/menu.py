"""
Menu catalog and meal history entities.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from domain.enums import MealPeriod

UNCATEGORIZED = "기타"


class MenuItem(BaseModel):
    """A known menu in the catalog. Names are unique across the catalog."""

    model_config = ConfigDict(frozen=True)

    id: int
    name: str = Field(..., min_length=1)
    category: str = UNCATEGORIZED
    calories: Optional[int] = Field(default=None, ge=0)
    spicy_level: Optional[int] = Field(default=None, ge=0, le=5)

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("menu name must not be blank")
        return v


class MealRecord(BaseModel):
    """One entry of a user's append-only meal history."""

    model_config = ConfigDict(frozen=True)

    id: int
    user_id: str
    menu_id: int
    meal_period: MealPeriod
    eaten_at: datetime
    rating: Optional[int] = Field(default=None, ge=1, le=5)
