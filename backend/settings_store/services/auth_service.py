"""
Local email/password authentication.

The decision is composed of two capabilities: looking a user up by email and
checking a password against that user. Neither issues sessions or tokens.
"""
from dataclasses import dataclass
from typing import Any, Mapping, Optional, Protocol

from motor.motor_asyncio import AsyncIOMotorDatabase

from settings_store.core.security import verify_password
from settings_store.database.databases.app_db import users_collection_name
from settings_store.models.user import User

UNKNOWN_EMAIL_MESSAGE = "This email is not registered."
WRONG_PASSWORD_MESSAGE = "This password is not correct."
MISSING_CREDENTIALS_MESSAGE = "Missing credentials"


class UserLookup(Protocol):
    async def find_by_email(self, email: str) -> Optional[User]:
        ...


class PasswordVerifier(Protocol):
    async def verify(self, user: User, password: str) -> bool:
        ...


@dataclass
class AuthResult:
    """Outcome of an authentication attempt."""
    user: Optional[User] = None
    message: Optional[str] = None

    @property
    def authenticated(self) -> bool:
        return self.user is not None


class MongoUserLookup:
    """User lookup backed by the users collection."""

    def __init__(self, db: AsyncIOMotorDatabase):
        """Initialize with the application database."""
        self.users_collection = db[users_collection_name()]

    async def find_by_email(self, email: str) -> Optional[User]:
        """
        Get user by email.

        Returns:
            User model or None if not found
        """
        user_doc = await self.users_collection.find_one({"email": email})

        if not user_doc:
            return None

        user_doc["_id"] = str(user_doc["_id"])
        return User(**user_doc)


class BcryptPasswordVerifier:
    """Compares a plain password with the user's bcrypt hash."""

    async def verify(self, user: User, password: str) -> bool:
        return verify_password(password, user.hashed_password)


class LocalAuthenticator:
    """Email/password strategy: lookup, compare, then succeed or fail."""

    def __init__(
        self,
        lookup: UserLookup,
        verifier: PasswordVerifier,
        username_field: str = "email",
        password_field: str = "password",
    ):
        self.lookup = lookup
        self.verifier = verifier
        self.username_field = username_field
        self.password_field = password_field

    async def authenticate(self, email: str, password: str) -> AuthResult:
        """
        Check a pair of credentials.

        Lookup and verifier errors propagate to the caller; a rejected
        attempt is reported through AuthResult.message instead.
        """
        user = await self.lookup.find_by_email(email.lower())

        # no user found with that email
        if user is None:
            return AuthResult(message=UNKNOWN_EMAIL_MESSAGE)

        if not await self.verifier.verify(user, password):
            return AuthResult(message=WRONG_PASSWORD_MESSAGE)

        return AuthResult(user=user)

    async def authenticate_credentials(self, body: Mapping[str, Any]) -> AuthResult:
        """Authenticate from a request body using the configured field names."""
        email = body.get(self.username_field)
        password = body.get(self.password_field)
        if not email or not password:
            return AuthResult(message=MISSING_CREDENTIALS_MESSAGE)
        return await self.authenticate(str(email), str(password))
