"""
Service layer for authentication.
"""
from settings_store.services.auth_service import (
    AuthResult,
    BcryptPasswordVerifier,
    LocalAuthenticator,
    MongoUserLookup,
)

__all__ = [
    "AuthResult",
    "BcryptPasswordVerifier",
    "LocalAuthenticator",
    "MongoUserLookup",
]
