"""Services package - Business logic layer"""

from services.edit_distance import edit_distance
from services.menu_matcher import MenuIndex, resolve_menu
from services.meal_period import classify_meal_period
from services.meal_parser import MealParser, extract_menu_name
from services.scoring import RecommendationScorer
from services.recommendation_engine import RecommendationEngine
from services.menu_service import MenuService
from services.recommendation_service import RecommendationService

__all__ = [
    "edit_distance",
    "MenuIndex",
    "resolve_menu",
    "classify_meal_period",
    "MealParser",
    "extract_menu_name",
    "RecommendationScorer",
    "RecommendationEngine",
    "MenuService",
    "RecommendationService",
]
