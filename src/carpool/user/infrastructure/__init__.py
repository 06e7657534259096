from .cached_user_repository import CachedUserRepository
from .sqlalchemy_user_repository import SqlAlchemyUserRepository

__all__ = ["CachedUserRepository", "SqlAlchemyUserRepository"]
