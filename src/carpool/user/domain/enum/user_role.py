from enum import Enum


class UserRole(str, Enum):
    """ユーザーのロール"""

    USER = "USER"
    DRIVER = "DRIVER"
    ADMIN = "ADMIN"
