from .bcrypt_password_service import BcryptPasswordService
from .jose_token_service import JoseTokenService

__all__ = ["BcryptPasswordService", "JoseTokenService"]
