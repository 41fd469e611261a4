"""Enums for model fields."""

from enum import Enum


class UserRole(str, Enum):
    """Capability tag on a user account."""

    CUSTOMER = "customer"
    BARBER = "barber"

    def can_own_shop(self) -> bool:
        """Check if this role may create and manage a shop."""
        return self == UserRole.BARBER
