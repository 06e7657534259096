from .entity import City as City
from .entity import Travel as Travel
from .entity import TravelFilters as TravelFilters
from .enum import TravelCityType as TravelCityType
from .repository import CityRepository as CityRepository
from .repository import TravelRepository as TravelRepository
