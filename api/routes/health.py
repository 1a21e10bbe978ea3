"""Health check and utility routes"""

import logging

from fastapi import APIRouter, Depends

from api.dependencies import get_db
from app.config import settings
from domain.models import InMemoryDatabase

router = APIRouter(tags=["Health"])
logger = logging.getLogger("menubot.api.health")


@router.get("/health-check")
def health_check(db: InMemoryDatabase = Depends(get_db)):
    """Basic health check endpoint"""
    return {
        "status": "ok",
        "service": settings.app_name,
        "version": settings.app_version,
        "menu_count": len(db.menus),
    }
