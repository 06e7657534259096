from .create_city import CreateCityUseCase
from .create_travel import CreateTravelInput, CreateTravelUseCase
from .delete_city import DeleteCityUseCase
from .delete_travel import DeleteTravelUseCase
from .find_travels import FindTravelsUseCase
from .get_travel import GetTravelUseCase
from .list_cities import ListCitiesUseCase
from .list_travels import ListTravelsUseCase

__all__ = [
    "CreateCityUseCase",
    "CreateTravelInput",
    "CreateTravelUseCase",
    "DeleteCityUseCase",
    "DeleteTravelUseCase",
    "FindTravelsUseCase",
    "GetTravelUseCase",
    "ListCitiesUseCase",
    "ListTravelsUseCase",
]
