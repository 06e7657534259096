from .cached_brand_repository import CachedBrandRepository
from .cached_car_repository import CachedCarRepository
from .cached_color_repository import CachedColorRepository
from .cached_model_repository import CachedModelRepository
from .sqlalchemy_brand_repository import SqlAlchemyBrandRepository
from .sqlalchemy_car_repository import SqlAlchemyCarRepository
from .sqlalchemy_color_repository import SqlAlchemyColorRepository
from .sqlalchemy_model_repository import SqlAlchemyModelRepository

__all__ = [
    "CachedBrandRepository",
    "CachedCarRepository",
    "CachedColorRepository",
    "CachedModelRepository",
    "SqlAlchemyBrandRepository",
    "SqlAlchemyCarRepository",
    "SqlAlchemyColorRepository",
    "SqlAlchemyModelRepository",
]
