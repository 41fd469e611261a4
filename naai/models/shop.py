"""Shop and service models."""

from sqlalchemy import Boolean, Column, Float, ForeignKey, Integer, String, Text
from sqlalchemy.orm import backref, relationship

from naai.database import Base
from naai.models.mixins import TimestampMixin


class Shop(Base, TimestampMixin):
    """A barbershop listing. Each barber owns at most one."""

    __tablename__ = "shops"

    id = Column(Integer, primary_key=True, index=True)
    barber_id = Column(Integer, ForeignKey("users.id"), unique=True, nullable=False, index=True)
    name = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    address = Column(String(255), nullable=False)
    city = Column(String(100), nullable=False, index=True)
    state = Column(String(100), nullable=True)
    zip_code = Column(String(20), nullable=True)
    phone = Column(String(50), nullable=True)
    email = Column(String(255), nullable=True)
    latitude = Column(Float, nullable=True)
    longitude = Column(Float, nullable=True)
    image_url = Column(String(500), nullable=True)
    rating = Column(Float, nullable=False, default=0.0)
    is_active = Column(Boolean, nullable=False, default=True)

    # Relationships
    barber = relationship("User", backref=backref("shop", uselist=False))
    services = relationship(
        "Service",
        back_populates="shop",
        cascade="all, delete-orphan",
        order_by="Service.id",
    )


class Service(Base, TimestampMixin):
    """A bookable service offered by a shop."""

    __tablename__ = "services"

    id = Column(Integer, primary_key=True, index=True)
    shop_id = Column(
        Integer, ForeignKey("shops.id", ondelete="CASCADE"), nullable=False, index=True
    )
    name = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    price = Column(Float, nullable=False)
    duration = Column(Integer, nullable=False)  # minutes

    # Relationships
    shop = relationship("Shop", back_populates="services")
