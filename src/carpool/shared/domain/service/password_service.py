from abc import ABC, abstractmethod

from carpool.shared.domain.exception import PasswordError
from carpool.shared.domain.result import Result


class PasswordService(ABC):
    """パスワードハッシュのインターフェース"""

    @abstractmethod
    def hash(self, password: str) -> Result[str, PasswordError]:
        raise NotImplementedError

    @abstractmethod
    def verify(self, password: str, hashed: str) -> Result[bool, PasswordError]:
        raise NotImplementedError
