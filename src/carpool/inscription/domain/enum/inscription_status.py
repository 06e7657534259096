from enum import Enum


class InscriptionStatus(str, Enum):
    """登録ステータス（作成時は PENDING）"""

    PENDING = "PENDING"
    CONFIRMED = "CONFIRMED"
    CANCELLED = "CANCELLED"
