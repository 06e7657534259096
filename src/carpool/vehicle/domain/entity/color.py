from dataclasses import dataclass


@dataclass(frozen=True)
class Color:
    id: str
    name: str
    hex: str


@dataclass(frozen=True)
class CreateColorData:
    name: str
    hex: str


@dataclass(frozen=True)
class UpdateColorData:
    name: str | None = None
    hex: str | None = None

    def changes(self) -> dict[str, str]:
        return {k: v for k, v in vars(self).items() if v is not None}
