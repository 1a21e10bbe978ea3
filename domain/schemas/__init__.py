"""
Domain schemas package - Pydantic models for validation.
"""

from domain.schemas.recommendation_schemas import (
    RecommendationCandidate,
    ParsedMeal,
    MealHistoryEntry,
)
from domain.schemas.kakao_schemas import (
    KakaoRequest,
    KakaoResponse,
)

__all__ = [
    # Recommendation schemas
    "RecommendationCandidate",
    "ParsedMeal",
    "MealHistoryEntry",
    # Webhook schemas
    "KakaoRequest",
    "KakaoResponse",
]
