from dataclasses import dataclass


@dataclass(frozen=True)
class City:
    id: str
    name: str
    zipcode: str = ""


@dataclass(frozen=True)
class CreateCityData:
    name: str
    zipcode: str = ""
