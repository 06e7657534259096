from .city_repository import CityRepository as CityRepository
from .travel_repository import TravelRepository as TravelRepository
