"""
App package - Application configuration and core utilities.
Contains settings, exceptions, and logging setup.
"""

from app.config import settings
from app.exceptions import (
    MenuBotError,
    ServiceValidationError,
    NotFoundError,
    ConflictError,
)

__all__ = [
    "settings",
    "MenuBotError",
    "ServiceValidationError",
    "NotFoundError",
    "ConflictError",
]
