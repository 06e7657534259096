from dataclasses import dataclass
from datetime import datetime

from carpool.user.domain.enum import UserRole

ANONYMIZED_EMAIL_DOMAIN = "deleted.local"


@dataclass(frozen=True)
class User:
    """ユーザーエンティティ（パスワードハッシュは含まない）"""

    id: str
    email: str
    role: UserRole
    created_at: datetime
    updated_at: datetime
    first_name: str | None = None
    last_name: str | None = None
    phone: str | None = None
    anonymized_at: datetime | None = None

    @property
    def is_anonymized(self) -> bool:
        return self.anonymized_at is not None

    @property
    def is_driver(self) -> bool:
        return self.role == UserRole.DRIVER


@dataclass(frozen=True)
class UserCredentials:
    """ログイン照合用の認証情報"""

    user_id: str
    email: str
    password_hash: str | None
    role: UserRole
    anonymized_at: datetime | None = None

    @property
    def is_anonymized(self) -> bool:
        return self.anonymized_at is not None


@dataclass(frozen=True)
class CreateUserData:
    email: str
    password_hash: str
    first_name: str | None = None
    last_name: str | None = None
    phone: str | None = None


@dataclass(frozen=True)
class UpdateUserData:
    """None のフィールドは変更しない"""

    first_name: str | None = None
    last_name: str | None = None
    phone: str | None = None

    def changes(self) -> dict[str, str]:
        return {k: v for k, v in vars(self).items() if v is not None}


def anonymized_email(user_id: str) -> str:
    return f"anonymized-{user_id}@{ANONYMIZED_EMAIL_DOMAIN}"
