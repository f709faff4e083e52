"""Authentication service for registration, login and password handling."""

import logging

from passlib.context import CryptContext
from sqlalchemy import or_
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from achievify.config import get_settings
from achievify.exceptions import (
    ConflictError,
    InvalidCredentialsError,
    NotFoundError,
)
from achievify.models.user import User
from achievify.services.owned import optional_text, require

logger = logging.getLogger(__name__)

settings = get_settings()

# Password hashing context
pwd_context = CryptContext(
    schemes=["bcrypt"],
    deprecated="auto",
    bcrypt__rounds=settings.bcrypt_rounds,
)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a password against its hash."""
    return pwd_context.verify(plain_password, hashed_password)


def get_password_hash(password: str) -> str:
    """Hash a password."""
    return pwd_context.hash(password)


def get_user_by_username(db: Session, username: str) -> User | None:
    """Get a user by username."""
    return db.query(User).filter(User.username == username).first()


def get_user_by_email(db: Session, email: str) -> User | None:
    """Get a user by email."""
    return db.query(User).filter(User.email == email).first()


def get_user_by_identifier(db: Session, identifier: str) -> User | None:
    """Get a user whose username or email exactly equals ``identifier``."""
    return (
        db.query(User)
        .filter(or_(User.username == identifier, User.email == identifier))
        .order_by(User.id)
        .first()
    )


class AuthService:
    """Registration and login against the users table."""

    def __init__(self, db: Session):
        self.db = db

    def register(
        self,
        full_name: str | None,
        username: str | None,
        email: str | None,
        password: str | None,
        phone: str | None = None,
    ) -> User:
        """Create a user. Username conflicts are reported before email conflicts."""
        require("Missing required fields", full_name, username, email, password)
        username = username.strip()
        email = email.strip()

        if get_user_by_username(self.db, username):
            raise ConflictError("Username already taken")
        if get_user_by_email(self.db, email):
            raise ConflictError("Email already registered")

        user = User(
            full_name=full_name.strip(),
            username=username,
            email=email,
            phone=optional_text(phone),
            password_hash=get_password_hash(password),
        )
        self.db.add(user)
        try:
            self.db.commit()
        except IntegrityError:
            # Lost a race with a concurrent registration.
            self.db.rollback()
            raise ConflictError("Username or email already registered") from None
        self.db.refresh(user)
        logger.info(f"Registered user {user.id} ({user.username})")
        return user

    def authenticate(self, user_or_email: str | None, password: str | None) -> User:
        """Return the user matching the identifier and password."""
        require("Missing credentials", user_or_email, password)

        user = get_user_by_identifier(self.db, user_or_email)
        if user is None:
            raise NotFoundError("User not found", status_code=400)
        if not verify_password(password, user.password_hash):
            logger.warning(f"Failed login for user {user.id}")
            raise InvalidCredentialsError("Invalid password")
        return user
