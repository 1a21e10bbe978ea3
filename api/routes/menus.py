"""Menu catalog routes."""

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, Field

from api.dependencies import get_db
from app.exceptions import NotFoundError
from domain.models import InMemoryDatabase, MenuItem
from services.menu_service import MenuService

router = APIRouter(prefix="/menus", tags=["Menus"])
logger = logging.getLogger("menubot.api.menus")


class MenuCreate(BaseModel):
    """Request body for adding a menu."""

    name: str = Field(..., min_length=1)
    category: Optional[str] = None
    calories: Optional[int] = Field(default=None, ge=0)
    spicy_level: Optional[int] = Field(default=None, ge=0, le=5)


@router.get("", response_model=List[MenuItem])
def list_menus(
    category: Optional[str] = None,
    q: Optional[str] = None,
    db: InMemoryDatabase = Depends(get_db),
) -> List[MenuItem]:
    """
    List the catalog.

    Args:
        category: Only menus in this category
        q: Only menus whose name contains this keyword
    """
    if category is not None:
        menus = MenuService.find_by_category(db, category)
    else:
        menus = MenuService.get_all_menus(db)
    if q:
        menus = [m for m in menus if q in m.name]
    return menus


@router.get("/{name}", response_model=MenuItem)
def get_menu(name: str, db: InMemoryDatabase = Depends(get_db)) -> MenuItem:
    menu = MenuService.find_by_name(db, name)
    if menu is None:
        raise NotFoundError(f"Menu '{name}' not found", code="MENU_NOT_FOUND")
    return menu


@router.post("", response_model=MenuItem, status_code=status.HTTP_201_CREATED)
def create_menu(payload: MenuCreate, db: InMemoryDatabase = Depends(get_db)) -> MenuItem:
    return MenuService.save_menu(
        db,
        name=payload.name,
        category=payload.category,
        calories=payload.calories,
        spicy_level=payload.spicy_level,
    )
