"""FastAPI dependencies for authentication and database."""

from typing import Annotated

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from naai.database import get_db
from naai.errors import MissingTokenError
from naai.models.user import User
from naai.services.auth import get_user_by_id
from naai.services.shop_service import ShopService
from naai.services.tokens import TokenClaims, TokenService, get_token_service

# auto_error is off so a missing header reaches MissingTokenError (401)
security = HTTPBearer(auto_error=False)


def get_current_identity(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
    token_service: Annotated[TokenService, Depends(get_token_service)],
) -> TokenClaims:
    """Verify the bearer token and return the identity it carries.

    No database access happens here; handlers that need the role re-read the
    user themselves.
    """
    if credentials is None or not credentials.credentials:
        raise MissingTokenError()
    return token_service.verify(credentials.credentials)


def get_current_user(
    identity: Annotated[TokenClaims, Depends(get_current_identity)],
    db: Annotated[Session, Depends(get_db)],
) -> User:
    """Get the live user record for the token's identity."""
    return get_user_by_id(db, identity.user_id)


def get_shop_service(
    db: Annotated[Session, Depends(get_db)],
) -> ShopService:
    """Get shop service with dependencies."""
    return ShopService(db)
