"""Pydantic schemas for API requests and responses."""

from naai.schemas.auth import AuthResponse, MeResponse, UserLogin, UserResponse, UserSignup
from naai.schemas.shop import (
    BarberShopResponse,
    ServiceCreate,
    ServiceEnvelope,
    ServiceResponse,
    ShopCreate,
    ShopEnvelope,
    ShopListResponse,
    ShopResponse,
    ShopUpdate,
)

__all__ = [
    "AuthResponse",
    "MeResponse",
    "UserLogin",
    "UserResponse",
    "UserSignup",
    "BarberShopResponse",
    "ServiceCreate",
    "ServiceEnvelope",
    "ServiceResponse",
    "ShopCreate",
    "ShopEnvelope",
    "ShopListResponse",
    "ShopResponse",
    "ShopUpdate",
]
