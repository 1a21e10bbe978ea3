"""
API dependencies for dependency injection
"""

from datetime import datetime
from typing import Generator

from domain.models import InMemoryDatabase, get_db_session
from services.randomness import RandomSource, default_random_source


def get_db() -> Generator[InMemoryDatabase, None, None]:
    """
    Database dependency for FastAPI routes.

    Usage:
        @router.post("/example")
        def example(db: InMemoryDatabase = Depends(get_db)):
            # Use db here
            pass
    """
    yield from get_db_session()


def get_random_source() -> RandomSource:
    """Random source for score jitter; overridden in tests"""
    return default_random_source()


def get_now() -> datetime:
    """Reference time for scoring and meal timestamps; overridden in tests"""
    return datetime.now()
