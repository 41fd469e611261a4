"""User accounts: lookup, signup and credential checks."""

import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from naai.errors import ConflictError, InvalidCredentialsError, NotFoundError
from naai.models.enums import UserRole
from naai.models.user import User
from naai.services.passwords import dummy_verify, get_password_hash, verify_password

logger = logging.getLogger(__name__)

DUPLICATE_EMAIL_MESSAGE = "User with this email already exists"


def get_user_by_email(db: Session, email: str) -> User | None:
    """Get a user by email."""
    return db.query(User).filter(User.email == email.lower()).first()


def get_user_by_id(db: Session, user_id: int) -> User:
    """Get a user by id.

    Raises:
        NotFoundError: if the account no longer exists.
    """
    user = db.query(User).filter(User.id == user_id).first()
    if user is None:
        raise NotFoundError("User not found")
    return user


def create_user(
    db: Session,
    email: str,
    password: str,
    name: str | None = None,
    role: UserRole = UserRole.CUSTOMER,
) -> User:
    """Create a new user.

    Raises:
        ConflictError: if the email is taken, whether found up front or
            rejected by the unique index in a concurrent signup.
    """
    email = email.lower()
    if get_user_by_email(db, email):
        raise ConflictError(DUPLICATE_EMAIL_MESSAGE)

    user = User(
        email=email,
        password_hash=get_password_hash(password),
        name=name,
        role=UserRole(role).value,
    )
    db.add(user)
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        raise ConflictError(DUPLICATE_EMAIL_MESSAGE) from None
    db.refresh(user)
    logger.info(f"Created {user.role} account {user.id}")
    return user


def authenticate_user(db: Session, email: str, password: str) -> User:
    """Authenticate a user by email and password.

    Raises:
        InvalidCredentialsError: with the same message for an unknown email
            and a wrong password.
    """
    user = get_user_by_email(db, email)
    if not user:
        dummy_verify()
        raise InvalidCredentialsError()
    if not verify_password(password, user.password_hash):
        raise InvalidCredentialsError()
    return user
