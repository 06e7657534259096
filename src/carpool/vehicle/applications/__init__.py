from .create_brand import CreateBrandUseCase
from .create_car import CreateCarInput, CreateCarUseCase
from .create_color import CreateColorUseCase
from .delete_brand import DeleteBrandUseCase
from .delete_car import DeleteCarUseCase
from .delete_color import DeleteColorUseCase
from .list_brands import ListBrandsUseCase
from .list_cars import ListCarsUseCase
from .list_colors import ListColorsUseCase
from .update_car import UpdateCarInput, UpdateCarUseCase
from .update_color import UpdateColorUseCase

__all__ = [
    "CreateBrandUseCase",
    "CreateCarInput",
    "CreateCarUseCase",
    "CreateColorUseCase",
    "DeleteBrandUseCase",
    "DeleteCarUseCase",
    "DeleteColorUseCase",
    "ListBrandsUseCase",
    "ListCarsUseCase",
    "ListColorsUseCase",
    "UpdateCarInput",
    "UpdateCarUseCase",
    "UpdateColorUseCase",
]
