"""API routes package"""

from . import health, kakao, menus, recommendations

__all__ = ["health", "kakao", "menus", "recommendations"]
