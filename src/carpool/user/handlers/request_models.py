from pydantic import Field

from carpool.shared.utils.request_model import RequestModel


class UpdateUserRequest(RequestModel):
    """プロフィール更新リクエスト（省略したフィールドは変更しない）"""

    first_name: str | None = Field(default=None, min_length=1, max_length=100)
    last_name: str | None = Field(default=None, min_length=1, max_length=100)
    phone: str | None = Field(default=None, min_length=1, max_length=30)
