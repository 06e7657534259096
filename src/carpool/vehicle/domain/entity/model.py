from dataclasses import dataclass


@dataclass(frozen=True)
class Model:
    """車種（ブランド内で名前が一意）"""

    id: str
    name: str
    brand_id: str


@dataclass(frozen=True)
class CreateModelData:
    name: str
    brand_id: str
