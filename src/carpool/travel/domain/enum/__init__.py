from .travel_city_type import TravelCityType as TravelCityType
