from .brand_repository import BrandRepository as BrandRepository
from .car_repository import CarRepository as CarRepository
from .color_repository import ColorRepository as ColorRepository
from .model_repository import ModelRepository as ModelRepository
