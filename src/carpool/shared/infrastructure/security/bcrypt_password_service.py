import bcrypt

from carpool.shared.domain import Err, Ok, Result
from carpool.shared.domain.exception import PasswordError
from carpool.shared.domain.service import PasswordService


class BcryptPasswordService(PasswordService):
    """bcrypt を使用した PasswordService の具象実装"""

    def __init__(self, rounds: int = 12) -> None:
        self._rounds = rounds

    def hash(self, password: str) -> Result[str, PasswordError]:
        try:
            hashed = bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt(self._rounds))
        except (TypeError, ValueError) as e:
            return Err(PasswordError("Failed to hash password", cause=e))
        return Ok(hashed.decode("utf-8"))

    def verify(self, password: str, hashed: str) -> Result[bool, PasswordError]:
        try:
            return Ok(bcrypt.checkpw(password.encode("utf-8"), hashed.encode("utf-8")))
        except (TypeError, ValueError) as e:
            return Err(PasswordError("Failed to verify password", cause=e))
