from .brand import Brand as Brand
from .brand import CreateBrandData as CreateBrandData
from .car import Car as Car
from .car import CreateCarData as CreateCarData
from .car import UpdateCarData as UpdateCarData
from .color import Color as Color
from .color import CreateColorData as CreateColorData
from .color import UpdateColorData as UpdateColorData
from .model import CreateModelData as CreateModelData
from .model import Model as Model
