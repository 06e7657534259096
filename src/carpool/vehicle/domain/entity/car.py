from dataclasses import dataclass


@dataclass(frozen=True)
class Car:
    """車両エンティティ（ナンバープレートは一意）"""

    id: str
    license_plate: str
    model_id: str
    color_id: str | None = None


@dataclass(frozen=True)
class CreateCarData:
    license_plate: str
    model_id: str
    color_id: str | None = None


@dataclass(frozen=True)
class UpdateCarData:
    """None のフィールドは変更しない"""

    license_plate: str | None = None
    model_id: str | None = None
    color_id: str | None = None

    def changes(self) -> dict[str, str]:
        return {k: v for k, v in vars(self).items() if v is not None}
