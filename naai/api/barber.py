"""Barber dashboard endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends

from naai.api.dependencies import get_current_identity, get_shop_service
from naai.schemas.shop import BarberShopResponse, ShopResponse
from naai.services.shop_service import ShopService
from naai.services.tokens import TokenClaims

router = APIRouter(prefix="/api/barber", tags=["barber"])


@router.get("/shop", response_model=BarberShopResponse)
def get_my_shop(
    identity: Annotated[TokenClaims, Depends(get_current_identity)],
    shop_service: Annotated[ShopService, Depends(get_shop_service)],
):
    """Get the calling barber's shop, or null if they have not created one yet."""
    shop = shop_service.get_barber_shop(identity.user_id)
    return BarberShopResponse(shop=ShopResponse.model_validate(shop) if shop else None)
