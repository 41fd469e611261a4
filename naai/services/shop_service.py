"""Shop and service management."""

import logging

from sqlalchemy import or_
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, joinedload, selectinload

from naai.errors import AuthorizationError, ConflictError, NotFoundError
from naai.models.shop import Service, Shop
from naai.models.user import User
from naai.schemas.shop import ServiceCreate, ShopCreate, ShopUpdate
from naai.services.auth import get_user_by_id

logger = logging.getLogger(__name__)

SHOP_EXISTS_MESSAGE = "You already have a shop. Use update endpoint."


class ShopService:
    """Service for shop-related operations.

    Role checks re-read the user row, since tokens only carry id and email.
    Ownership checks compare ``Shop.barber_id`` with the token's user id.
    """

    def __init__(self, db: Session):
        self.db = db

    def _shop_query(self):
        return self.db.query(Shop).options(
            joinedload(Shop.barber),
            selectinload(Shop.services),
        )

    def list_shops(self, city: str | None = None, search: str | None = None) -> list[Shop]:
        """List active shops, best rated first.

        ``city`` is a case-insensitive substring match on the city; ``search``
        matches name, description or address the same way.
        """
        query = self._shop_query().filter(Shop.is_active == True)  # noqa: E712

        if city:
            query = query.filter(Shop.city.icontains(city, autoescape=True))

        if search:
            query = query.filter(
                or_(
                    Shop.name.icontains(search, autoescape=True),
                    Shop.description.icontains(search, autoescape=True),
                    Shop.address.icontains(search, autoescape=True),
                )
            )

        return query.order_by(Shop.rating.desc(), Shop.id).all()

    def get_shop(self, shop_id: int) -> Shop:
        """Get a shop by id, active or not."""
        shop = self._shop_query().filter(Shop.id == shop_id).first()
        if not shop:
            raise NotFoundError("Shop not found")
        return shop

    def require_barber(self, user_id: int, message: str) -> User:
        """Load the user and check that they are a barber."""
        user = get_user_by_id(self.db, user_id)
        if not user.is_barber:
            raise AuthorizationError(message)
        return user

    def get_owned_shop(self, shop_id: int, user_id: int, message: str) -> Shop:
        """Get a shop and check that ``user_id`` is its barber."""
        shop = self.get_shop(shop_id)
        if shop.barber_id != user_id:
            raise AuthorizationError(message)
        return shop

    def get_barber_shop(self, user_id: int) -> Shop | None:
        """Get the calling barber's own shop, if they have one."""
        barber = self.require_barber(user_id, "Only barbers can access this endpoint")
        return self._shop_query().filter(Shop.barber_id == barber.id).first()

    def create_shop(self, user_id: int, data: ShopCreate) -> Shop:
        """Create a barber's shop together with its initial services.

        The shop and its services are committed in one transaction.
        """
        barber = self.require_barber(user_id, "Only barbers can create shops")

        existing = self.db.query(Shop.id).filter(Shop.barber_id == barber.id).first()
        if existing:
            raise ConflictError(SHOP_EXISTS_MESSAGE)

        shop = Shop(**data.model_dump(exclude={"services"}), barber_id=barber.id)
        shop.services = [Service(**service.model_dump()) for service in data.services]
        self.db.add(shop)
        try:
            self.db.commit()
        except IntegrityError:
            # Another request created this barber's shop first
            self.db.rollback()
            raise ConflictError(SHOP_EXISTS_MESSAGE) from None

        logger.info(
            f"Barber {barber.id} created shop {shop.id} with {len(data.services)} services"
        )
        return self.get_shop(shop.id)

    def update_shop(self, shop_id: int, user_id: int, data: ShopUpdate) -> Shop:
        """Apply the fields present in ``data`` to the caller's shop."""
        shop = self.get_owned_shop(shop_id, user_id, "You can only update your own shop")

        for field, value in data.model_dump(exclude_unset=True).items():
            setattr(shop, field, value)

        self.db.commit()
        return self.get_shop(shop.id)

    def add_service(self, shop_id: int, user_id: int, data: ServiceCreate) -> Service:
        """Add a service to the caller's shop."""
        shop = self.get_owned_shop(
            shop_id, user_id, "You can only add services to your own shop"
        )

        service = Service(**data.model_dump(), shop_id=shop.id)
        self.db.add(service)
        self.db.commit()
        self.db.refresh(service)
        return service
