from dataclasses import dataclass

from aws_lambda_powertools import Logger

from carpool.auth.domain import AuthToken
from carpool.shared.domain import Err, Ok, RepositoryError, Result
from carpool.shared.domain.exception import (
    ConstraintViolationError,
    PasswordError,
    TokenError,
    UserAlreadyExistsError,
)
from carpool.shared.domain.service import (
    EmailService,
    PasswordService,
    TokenClaims,
    TokenService,
)
from carpool.user.domain.entity import CreateUserData
from carpool.user.domain.repository import UserRepository

logger = Logger(child=True)


@dataclass(frozen=True)
class RegisterInput:
    email: str
    password: str
    first_name: str | None = None
    last_name: str | None = None
    phone: str | None = None


class RegisterUseCase:
    """ユーザー登録ユースケース

    登録完了メールの送信失敗はログに残すのみで、登録自体は成功とする。
    """

    def __init__(
        self,
        user_repository: UserRepository,
        password_service: PasswordService,
        token_service: TokenService,
        email_service: EmailService,
    ) -> None:
        self._user_repository = user_repository
        self._password_service = password_service
        self._token_service = token_service
        self._email_service = email_service

    def execute(
        self, input: RegisterInput
    ) -> Result[
        AuthToken, UserAlreadyExistsError | PasswordError | TokenError | RepositoryError
    ]:
        exists = self._user_repository.exists_by_email(input.email)
        if not exists.success:
            return exists
        if exists.value:
            return Err(UserAlreadyExistsError(input.email))

        hashed = self._password_service.hash(input.password)
        if not hashed.success:
            return hashed

        created = self._user_repository.create(
            CreateUserData(
                email=input.email,
                password_hash=hashed.value,
                first_name=input.first_name,
                last_name=input.last_name,
                phone=input.phone,
            )
        )
        if not created.success:
            if isinstance(created.error, ConstraintViolationError):
                return Err(UserAlreadyExistsError(input.email))
            return created
        user = created.value

        sent = self._email_service.send_welcome_email(user.email, user.first_name or "")
        if not sent.success:
            logger.warning(
                "Failed to send welcome email",
                extra={"user_id": user.id, "error": sent.error.message},
            )

        token = self._token_service.sign(TokenClaims(user_id=user.id, role=user.role.value))
        if not token.success:
            return token

        logger.info("User registered", extra={"user_id": user.id})
        return Ok(AuthToken(user_id=user.id, token=token.value))
