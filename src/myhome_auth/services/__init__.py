"""Authentication services.

Provides password hashing, bearer token encoding and security token
lifecycle management.
"""

from myhome_auth.services.password_service import PasswordHashingService
from myhome_auth.services.security_token_service import SecurityTokenService
from myhome_auth.services.token_codec import JWTCodec

__all__ = [
    "JWTCodec",
    "PasswordHashingService",
    "SecurityTokenService",
]
