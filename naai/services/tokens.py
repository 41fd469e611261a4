"""Bearer token issuing and verification."""

import logging
from dataclasses import dataclass
from datetime import UTC, datetime, timedelta
from functools import lru_cache

from jose import ExpiredSignatureError, JWTError, jwt

from naai.config import get_settings
from naai.errors import InvalidTokenError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TokenClaims:
    """Identity carried by a verified token."""

    user_id: int
    email: str
    issued_at: datetime
    expires_at: datetime


class TokenService:
    """Signs and verifies access tokens with a fixed lifetime.

    Tokens are not stored anywhere and cannot be revoked: a token stays
    valid until ``exp`` even if the account changes in the meantime.
    """

    def __init__(self, secret: str, algorithm: str = "HS256", lifetime: timedelta | None = None):
        self.secret = secret
        self.algorithm = algorithm
        self.lifetime = lifetime or timedelta(hours=24)

    def issue(self, user_id: int, email: str, now: datetime | None = None) -> str:
        """Create a signed token for the given identity."""
        issued_at = (now or datetime.now(UTC)).replace(microsecond=0)
        to_encode = {
            "sub": str(user_id),
            "email": email,
            "iat": issued_at,
            "exp": issued_at + self.lifetime,
        }
        return jwt.encode(to_encode, self.secret, algorithm=self.algorithm)

    def verify(self, token: str) -> TokenClaims:
        """Decode and validate a token.

        Raises:
            InvalidTokenError: for any failure. Expiry and bad signatures are
                only told apart in the debug log.
        """
        try:
            payload = jwt.decode(
                token,
                self.secret,
                algorithms=[self.algorithm],
                options={"require_exp": True, "require_iat": True, "require_sub": True},
            )
        except ExpiredSignatureError:
            logger.debug("Rejected expired token")
            raise InvalidTokenError() from None
        except JWTError as e:
            logger.debug(f"Rejected invalid token: {e}")
            raise InvalidTokenError() from None

        try:
            return TokenClaims(
                user_id=int(payload["sub"]),
                email=str(payload["email"]),
                issued_at=datetime.fromtimestamp(payload["iat"], UTC),
                expires_at=datetime.fromtimestamp(payload["exp"], UTC),
            )
        except (KeyError, TypeError, ValueError):
            logger.debug("Rejected token with malformed claims")
            raise InvalidTokenError() from None


@lru_cache
def get_token_service() -> TokenService:
    """Token service keyed with the configured secret."""
    settings = get_settings()
    return TokenService(
        secret=settings.jwt_secret,
        algorithm=settings.jwt_algorithm,
        lifetime=timedelta(minutes=settings.jwt_expiration_minutes),
    )
