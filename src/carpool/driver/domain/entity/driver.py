from dataclasses import dataclass


@dataclass(frozen=True)
class Driver:
    """運転者エンティティ（1 ユーザーにつき 1 件）"""

    id: str
    user_id: str
    driver_license: str


@dataclass(frozen=True)
class CreateDriverData:
    user_id: str
    driver_license: str
