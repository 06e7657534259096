from pydantic import Field

from carpool.shared.utils.request_model import RequestModel

EMAIL_PATTERN = r"^[^@\s]+@[^@\s]+\.[^@\s]+$"


class RegisterRequest(RequestModel):
    """ユーザー登録リクエストスキーマ"""

    email: str = Field(
        ...,
        max_length=255,
        pattern=EMAIL_PATTERN,
        description="メールアドレス",
        examples=["jane@example.com"],
    )
    password: str = Field(..., min_length=8, max_length=72, description="パスワード")
    first_name: str | None = Field(default=None, max_length=100)
    last_name: str | None = Field(default=None, max_length=100)
    phone: str | None = Field(default=None, max_length=30)


class LoginRequest(RequestModel):
    email: str = Field(..., max_length=255, pattern=EMAIL_PATTERN)
    password: str = Field(..., min_length=1, max_length=72)
