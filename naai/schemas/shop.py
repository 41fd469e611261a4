"""Shop and service schemas."""

from datetime import datetime

from pydantic import ConfigDict, Field, model_validator

from naai.schemas.base import CamelModel

REQUIRED_SHOP_FIELDS = ("name", "address", "city")


class _Input(CamelModel):
    model_config = ConfigDict(str_strip_whitespace=True)


class ServiceCreate(_Input):
    """A service offered by a shop."""

    name: str = Field(..., min_length=1, max_length=255)
    description: str | None = Field(None, max_length=2000)
    price: float = Field(..., ge=0)
    duration: int = Field(..., gt=0, description="Duration in minutes")


class ShopFields(_Input):
    """Optional descriptive fields shared by create and update."""

    description: str | None = Field(None, max_length=5000)
    state: str | None = Field(None, max_length=100)
    zip_code: str | None = Field(None, max_length=20)
    phone: str | None = Field(None, max_length=50)
    email: str | None = Field(None, max_length=255)
    latitude: float | None = Field(None, ge=-90, le=90)
    longitude: float | None = Field(None, ge=-180, le=180)
    image_url: str | None = Field(None, max_length=500)


class ShopCreate(ShopFields):
    """Create a shop, optionally with its initial services."""

    name: str = Field(..., min_length=1, max_length=255)
    address: str = Field(..., min_length=1, max_length=255)
    city: str = Field(..., min_length=1, max_length=100)
    services: list[ServiceCreate] = Field(default_factory=list)


class ShopUpdate(ShopFields):
    """Update a shop. Only the fields present in the body are applied."""

    name: str | None = Field(None, min_length=1, max_length=255)
    address: str | None = Field(None, min_length=1, max_length=255)
    city: str | None = Field(None, min_length=1, max_length=100)
    is_active: bool | None = None

    @model_validator(mode="after")
    def reject_null_required_fields(self) -> "ShopUpdate":
        for field in REQUIRED_SHOP_FIELDS:
            if field in self.model_fields_set and getattr(self, field) is None:
                raise ValueError(f"{field} cannot be null")
        if "is_active" in self.model_fields_set and self.is_active is None:
            raise ValueError("is_active cannot be null")
        return self


class BarberSummary(CamelModel):
    """Owner summary embedded in shop responses."""

    id: int
    name: str | None
    email: str


class ServiceSummary(CamelModel):
    id: int
    name: str
    price: float
    duration: int


class ServiceResponse(CamelModel):
    """Service response."""

    id: int
    shop_id: int
    name: str
    description: str | None
    price: float
    duration: int
    created_at: datetime
    updated_at: datetime


class ShopBase(CamelModel):
    id: int
    barber_id: int
    name: str
    description: str | None
    address: str
    city: str
    state: str | None
    zip_code: str | None
    phone: str | None
    email: str | None
    latitude: float | None
    longitude: float | None
    image_url: str | None
    rating: float
    is_active: bool
    created_at: datetime
    updated_at: datetime
    barber: BarberSummary | None = None


class ShopListItem(ShopBase):
    """Shop as shown in the browse listing."""

    services: list[ServiceSummary] = []


class ShopResponse(ShopBase):
    """Shop with its full service records."""

    services: list[ServiceResponse] = []


class ShopListResponse(CamelModel):
    shops: list[ShopListItem]


class ShopEnvelope(CamelModel):
    shop: ShopResponse
    message: str | None = None


class BarberShopResponse(CamelModel):
    shop: ShopResponse | None


class ServiceEnvelope(CamelModel):
    service: ServiceResponse
    message: str
