from dataclasses import dataclass


@dataclass(frozen=True)
class Brand:
    id: str
    name: str


@dataclass(frozen=True)
class CreateBrandData:
    name: str
