from .travel import CityRecord, InscriptionRecord, TravelCityRecord, TravelRecord
from .user import DriverRecord, UserRecord
from .vehicle import BrandRecord, CarRecord, ColorRecord, ModelRecord

__all__ = [
    "UserRecord",
    "DriverRecord",
    "BrandRecord",
    "ModelRecord",
    "ColorRecord",
    "CarRecord",
    "CityRecord",
    "TravelRecord",
    "TravelCityRecord",
    "InscriptionRecord",
]
