"""
Chat platform skill routes.

Every endpoint answers HTTP 200 with a simple-text bubble, including on
failure, because the platform shows nothing for non-200 responses.
"""

import logging
from datetime import datetime
from typing import List

from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse

from api.dependencies import get_db, get_now, get_random_source
from app.config import settings
from domain.enums import MealPeriod
from domain.models import InMemoryDatabase
from domain.schemas.kakao_schemas import KakaoRequest, KakaoResponse
from domain.schemas.recommendation_schemas import MealHistoryEntry, RecommendationCandidate
from services.meal_parser import MealParser
from services.meal_period import classify_meal_period
from services.menu_service import MenuService
from services.randomness import RandomSource
from services.recommendation_service import RecommendationService

router = APIRouter(prefix="/kakao", tags=["Kakao"])
logger = logging.getLogger("menubot.api.kakao")

NO_RECOMMENDATION_TEXT = "죄송합니다. 추천할 메뉴가 없습니다."
RECOMMEND_ERROR_TEXT = "응답 생성 중 오류가 발생했습니다."
PARSE_FAILED_TEXT = (
    "메뉴 이름을 찾을 수 없어요 😅\n\n"
    "이렇게 말씀해주세요:\n"
    "• \"김치찌개 먹었어\"\n"
    "• \"점심에 파스타\"\n"
    "• \"저녁 먹었어 돈카츠\""
)
RECORD_ERROR_TEXT = "기록 중 오류가 발생했어요 😭\n다시 시도해주세요!"
EMPTY_HISTORY_TEXT = "아직 기록된 식사가 없습니다."
HISTORY_ERROR_TEXT = "기록을 불러오는 중 오류가 발생했어요 😭\n잠시 후 다시 시도해주세요!"


def format_recommendations(period: MealPeriod, recommendations: List[RecommendationCandidate]) -> str:
    lines = [f"🍽️ {period.description} 추천 메뉴입니다!", ""]
    for i, rec in enumerate(recommendations, start=1):
        lines.append(f"{i}. {rec.menu_name} ({rec.category})")
        if rec.reason:
            lines.append(f"   💡 {rec.reason}")
        lines.append("")
    return "\n".join(lines).rstrip() + "\n"


def format_history(days: int, entries: List[MealHistoryEntry]) -> str:
    lines = [f"📊 최근 {days}일 식사 기록", ""]
    for entry in entries:
        lines.append(
            f"• {entry.eaten_at.date().isoformat()} - {entry.menu_name} ({entry.meal_period.description})"
        )
    return "\n".join(lines) + "\n"


@router.post("/recommend")
def recommend_menu(
    request: KakaoRequest,
    db: InMemoryDatabase = Depends(get_db),
    rng: RandomSource = Depends(get_random_source),
    now: datetime = Depends(get_now),
) -> dict:
    """Recommend menus for the requesting user."""
    logger.info(f"Recommendation request - user: {request.user_id}, utterance: {request.utterance}")

    period = classify_meal_period(request.utterance, now=now)

    try:
        recommendations = RecommendationService.recommend_menus(
            db, request.user_id, settings.recommendation_count, now=now, rng=rng
        )
    except Exception:
        logger.exception("Error building recommendations")
        return KakaoResponse.simple_text(RECOMMEND_ERROR_TEXT).to_payload()

    if not recommendations:
        logger.warning("No recommendations available")
        return KakaoResponse.simple_text(NO_RECOMMENDATION_TEXT).to_payload()

    text = format_recommendations(period, recommendations)
    logger.debug(f"Response text: {text}")
    return KakaoResponse.simple_text(text).to_payload()


@router.post("/record")
def record_meal(
    request: KakaoRequest,
    db: InMemoryDatabase = Depends(get_db),
    now: datetime = Depends(get_now),
) -> dict:
    """Parse a free-text meal statement and append it to the user's history."""
    logger.info(f"Record request - user: {request.user_id}, utterance: {request.utterance}")

    try:
        parsed = MealParser.parse_meal_message(
            request.utterance, MenuService.get_all_menus(db), now=now
        )
        if parsed is None:
            return KakaoResponse.simple_text(PARSE_FAILED_TEXT).to_payload()

        _, menu = RecommendationService.record_meal(
            db, request.user_id, parsed.menu_name, parsed.meal_period, now=now
        )
    except Exception:
        logger.exception("Error recording meal")
        return KakaoResponse.simple_text(RECORD_ERROR_TEXT).to_payload()

    text = (
        "✅ 기록 완료!\n\n"
        f"{parsed.meal_period.description}에 '{menu.name}' 드셨군요.\n"
        "다음 추천에 반영할게요! 😊"
    )
    return KakaoResponse.simple_text(text).to_payload()


@router.post("/history")
def get_history(
    request: KakaoRequest,
    db: InMemoryDatabase = Depends(get_db),
    now: datetime = Depends(get_now),
) -> dict:
    """List the user's recent meals."""
    logger.info(f"History request - user: {request.user_id}")

    try:
        entries = RecommendationService.get_recent_meals(
            db, request.user_id, settings.history_days, now=now
        )
    except Exception:
        logger.exception("Error loading meal history")
        return KakaoResponse.simple_text(HISTORY_ERROR_TEXT).to_payload()

    if not entries:
        return KakaoResponse.simple_text(EMPTY_HISTORY_TEXT).to_payload()

    text = format_history(settings.history_days, entries[: settings.history_limit])
    return KakaoResponse.simple_text(text).to_payload()


@router.get("/health", response_class=PlainTextResponse)
def health() -> str:
    return "Menu Bot is running!"
