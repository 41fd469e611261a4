"""Shop API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, status

from naai.api.dependencies import get_current_identity, get_shop_service
from naai.schemas.shop import (
    ServiceCreate,
    ServiceEnvelope,
    ServiceResponse,
    ShopCreate,
    ShopEnvelope,
    ShopListItem,
    ShopListResponse,
    ShopResponse,
    ShopUpdate,
)
from naai.services.shop_service import ShopService
from naai.services.tokens import TokenClaims

router = APIRouter(prefix="/api/shops", tags=["shops"])


@router.get("", response_model=ShopListResponse)
def list_shops(
    shop_service: Annotated[ShopService, Depends(get_shop_service)],
    city: Annotated[str | None, Query(max_length=100)] = None,
    search: Annotated[str | None, Query(max_length=255)] = None,
):
    """Browse active shops, optionally filtered by city and free text."""
    shops = shop_service.list_shops(city=city, search=search)
    return ShopListResponse(shops=[ShopListItem.model_validate(shop) for shop in shops])


@router.get("/{shop_id}", response_model=ShopEnvelope)
def get_shop(
    shop_id: int,
    shop_service: Annotated[ShopService, Depends(get_shop_service)],
):
    """Get a single shop with its services."""
    shop = shop_service.get_shop(shop_id)
    return ShopEnvelope(shop=ShopResponse.model_validate(shop))


@router.post("", response_model=ShopEnvelope, status_code=status.HTTP_201_CREATED)
def create_shop(
    shop_data: ShopCreate,
    identity: Annotated[TokenClaims, Depends(get_current_identity)],
    shop_service: Annotated[ShopService, Depends(get_shop_service)],
):
    """Create the calling barber's shop (barbers only, one per barber)."""
    shop = shop_service.create_shop(identity.user_id, shop_data)
    return ShopEnvelope(
        shop=ShopResponse.model_validate(shop),
        message="Shop created successfully",
    )


@router.put("/{shop_id}", response_model=ShopEnvelope)
def update_shop(
    shop_id: int,
    shop_data: ShopUpdate,
    identity: Annotated[TokenClaims, Depends(get_current_identity)],
    shop_service: Annotated[ShopService, Depends(get_shop_service)],
):
    """Update the caller's own shop."""
    shop = shop_service.update_shop(shop_id, identity.user_id, shop_data)
    return ShopEnvelope(
        shop=ShopResponse.model_validate(shop),
        message="Shop updated successfully",
    )


@router.post(
    "/{shop_id}/services", response_model=ServiceEnvelope, status_code=status.HTTP_201_CREATED
)
def add_service(
    shop_id: int,
    service_data: ServiceCreate,
    identity: Annotated[TokenClaims, Depends(get_current_identity)],
    shop_service: Annotated[ShopService, Depends(get_shop_service)],
):
    """Add a service to the caller's own shop."""
    service = shop_service.add_service(shop_id, identity.user_id, service_data)
    return ServiceEnvelope(
        service=ServiceResponse.model_validate(service),
        message="Service added successfully",
    )
