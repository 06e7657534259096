from dataclasses import dataclass

from carpool.auth.domain import AuthToken
from carpool.shared.domain import Err, Ok, RepositoryError, Result
from carpool.shared.domain.exception import InvalidCredentialsError, PasswordError, TokenError
from carpool.shared.domain.service import PasswordService, TokenClaims, TokenService
from carpool.user.domain.repository import UserRepository


@dataclass(frozen=True)
class LoginInput:
    email: str
    password: str


class LoginUseCase:
    """ログインユースケース

    メールアドレスが存在しない・匿名化済み・パスワード不一致は
    区別せず InvalidCredentialsError とする。
    """

    def __init__(
        self,
        user_repository: UserRepository,
        password_service: PasswordService,
        token_service: TokenService,
    ) -> None:
        self._user_repository = user_repository
        self._password_service = password_service
        self._token_service = token_service

    def execute(
        self, input: LoginInput
    ) -> Result[
        AuthToken, InvalidCredentialsError | PasswordError | TokenError | RepositoryError
    ]:
        found = self._user_repository.find_credentials_by_email(input.email)
        if not found.success:
            return found
        credentials = found.value
        if credentials is None or credentials.is_anonymized or not credentials.password_hash:
            return Err(InvalidCredentialsError())

        verified = self._password_service.verify(input.password, credentials.password_hash)
        if not verified.success:
            return verified
        if not verified.value:
            return Err(InvalidCredentialsError())

        token = self._token_service.sign(
            TokenClaims(user_id=credentials.user_id, role=credentials.role.value)
        )
        if not token.success:
            return token
        return Ok(AuthToken(user_id=credentials.user_id, token=token.value))
