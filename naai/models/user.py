"""User model."""

from sqlalchemy import Column, Integer, String

from naai.database import Base
from naai.models.enums import UserRole
from naai.models.mixins import TimestampMixin


class User(Base, TimestampMixin):
    """User model for authentication and shop ownership."""

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    email = Column(String(255), unique=True, nullable=False, index=True)  # stored lowercased
    password_hash = Column(String(255), nullable=False)
    name = Column(String(255), nullable=True)
    role = Column(String(20), nullable=False, default=UserRole.CUSTOMER.value)

    @property
    def is_barber(self) -> bool:
        return UserRole(self.role).can_own_shop()
