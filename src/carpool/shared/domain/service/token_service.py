from abc import ABC, abstractmethod
from dataclasses import dataclass

from carpool.shared.domain.exception import TokenError
from carpool.shared.domain.result import Result


@dataclass(frozen=True)
class TokenClaims:
    """認証トークンから取り出した呼び出し元の情報"""

    user_id: str
    role: str


class TokenService(ABC):
    """認証トークン（JWT）の発行・検証のインターフェース"""

    @abstractmethod
    def sign(self, claims: TokenClaims) -> Result[str, TokenError]:
        raise NotImplementedError

    @abstractmethod
    def verify(self, token: str) -> Result[TokenClaims, TokenError]:
        raise NotImplementedError
