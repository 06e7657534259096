from dataclasses import dataclass
from datetime import datetime

from carpool.inscription.domain.enum import InscriptionStatus


@dataclass(frozen=True)
class Inscription:
    """乗客の旅程への登録

    - 同一ユーザー・同一旅程の登録は 1 件まで
    - 旅程ごとの登録数は座席数を超えない
    """

    id: str
    user_id: str
    travel_id: str
    status: InscriptionStatus
    created_at: datetime


@dataclass(frozen=True)
class CreateInscriptionData:
    user_id: str
    travel_id: str
