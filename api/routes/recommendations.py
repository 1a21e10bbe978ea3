"""
Recommendation routes - JSON access to recommendations and meal history.
"""

import logging
from datetime import datetime
from typing import List

from fastapi import APIRouter, Depends, Query
from pydantic import BaseModel

from api.dependencies import get_db, get_now, get_random_source
from domain.models import InMemoryDatabase
from domain.schemas.recommendation_schemas import MealHistoryEntry, RecommendationCandidate
from services.randomness import RandomSource
from services.recommendation_service import RecommendationService

router = APIRouter(prefix="/recommendations", tags=["Recommendations"])
logger = logging.getLogger("menubot.api.recommendations")


class MostEatenMenu(BaseModel):
    menu_name: str
    category: str
    count: int


@router.get("/{user_id}", response_model=List[RecommendationCandidate])
def get_recommendations(
    user_id: str,
    limit: int = 3,
    db: InMemoryDatabase = Depends(get_db),
    rng: RandomSource = Depends(get_random_source),
    now: datetime = Depends(get_now),
) -> List[RecommendationCandidate]:
    """
    Get menu recommendations for a user.

    Args:
        user_id: Chat user identifier
        limit: Maximum number of recommendations (default 3)

    Returns:
        Recommended menus with scores and reasons
    """
    return RecommendationService.recommend_menus(db, user_id, limit, now=now, rng=rng)


@router.get("/{user_id}/history", response_model=List[MealHistoryEntry])
def get_history(
    user_id: str,
    days: int = Query(default=7, ge=1),
    db: InMemoryDatabase = Depends(get_db),
    now: datetime = Depends(get_now),
) -> List[MealHistoryEntry]:
    """Meals eaten in the last ``days`` days, newest first."""
    return RecommendationService.get_recent_meals(db, user_id, days, now=now)


@router.get("/{user_id}/most-eaten", response_model=List[MostEatenMenu])
def get_most_eaten(user_id: str, db: InMemoryDatabase = Depends(get_db)) -> List[MostEatenMenu]:
    return [
        MostEatenMenu(menu_name=menu.name, category=menu.category, count=count)
        for menu, count in RecommendationService.get_most_eaten_menus(db, user_id)
    ]
