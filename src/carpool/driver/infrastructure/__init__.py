from .cached_driver_repository import CachedDriverRepository
from .sqlalchemy_driver_repository import SqlAlchemyDriverRepository

__all__ = ["CachedDriverRepository", "SqlAlchemyDriverRepository"]
