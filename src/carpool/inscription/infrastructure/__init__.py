from .cached_inscription_repository import CachedInscriptionRepository
from .sqlalchemy_inscription_repository import SqlAlchemyInscriptionRepository

__all__ = ["CachedInscriptionRepository", "SqlAlchemyInscriptionRepository"]
