from dataclasses import dataclass


@dataclass(frozen=True)
class AuthToken:
    """登録・ログイン成功時に返す認証トークン"""

    user_id: str
    token: str
