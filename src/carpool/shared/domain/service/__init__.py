from .cache_service import CacheService
from .email_service import EmailService
from .password_service import PasswordService
from .token_service import TokenClaims, TokenService

__all__ = [
    "CacheService",
    "EmailService",
    "PasswordService",
    "TokenClaims",
    "TokenService",
]
