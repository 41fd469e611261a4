"""SQLAlchemy models."""

from naai.models.enums import UserRole
from naai.models.shop import Service, Shop
from naai.models.user import User

__all__ = [
    "User",
    "UserRole",
    "Shop",
    "Service",
]
