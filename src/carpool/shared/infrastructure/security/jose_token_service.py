import time
from typing import Callable

from jose import JWTError, jwt

from carpool.shared.domain import Err, Ok, Result
from carpool.shared.domain.exception import TokenError
from carpool.shared.domain.service import TokenClaims, TokenService


class JoseTokenService(TokenService):
    """python-jose を使用した JWT の発行・検証"""

    def __init__(
        self,
        secret: str,
        algorithm: str = "HS256",
        ttl_seconds: int = 7 * 24 * 3600,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self._secret = secret
        self._algorithm = algorithm
        self._ttl_seconds = ttl_seconds
        self._clock = clock

    def sign(self, claims: TokenClaims) -> Result[str, TokenError]:
        now = int(self._clock())
        payload = {
            "sub": claims.user_id,
            "role": claims.role,
            "iat": now,
            "exp": now + self._ttl_seconds,
        }
        try:
            return Ok(jwt.encode(payload, self._secret, algorithm=self._algorithm))
        except JWTError as e:
            return Err(TokenError("Failed to sign token", cause=e))

    def verify(self, token: str) -> Result[TokenClaims, TokenError]:
        try:
            payload = jwt.decode(token, self._secret, algorithms=[self._algorithm])
        except JWTError as e:
            return Err(TokenError("Invalid or expired token", cause=e))

        user_id = payload.get("sub")
        if not user_id:
            return Err(TokenError("Token has no subject"))
        return Ok(TokenClaims(user_id=user_id, role=payload.get("role", "USER")))
