from .cached_city_repository import CachedCityRepository
from .cached_travel_repository import CachedTravelRepository
from .sqlalchemy_city_repository import SqlAlchemyCityRepository
from .sqlalchemy_travel_repository import SqlAlchemyTravelRepository

__all__ = [
    "CachedCityRepository",
    "CachedTravelRepository",
    "SqlAlchemyCityRepository",
    "SqlAlchemyTravelRepository",
]
