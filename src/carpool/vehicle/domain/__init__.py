from .entity import Brand as Brand
from .entity import Car as Car
from .entity import Color as Color
from .entity import Model as Model
from .repository import BrandRepository as BrandRepository
from .repository import CarRepository as CarRepository
from .repository import ColorRepository as ColorRepository
from .repository import ModelRepository as ModelRepository
