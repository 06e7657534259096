from .exceptions import (
    AlreadyInscribedError,
    BrandNotFoundError,
    BusinessRuleViolationError,
    CarAlreadyExistsError,
    CarNotFoundError,
    CityNotFoundError,
    ColorAlreadyExistsError,
    ColorNotFoundError,
    DomainError,
    DriverAlreadyExistsError,
    DriverNotFoundError,
    DuplicateResourceError,
    ForbiddenError,
    InscriptionNotFoundError,
    InvalidCredentialsError,
    ModelNotFoundError,
    NoSeatsAvailableError,
    ResourceNotFoundError,
    TravelNotFoundError,
    UserAlreadyExistsError,
    UserNotFoundError,
)
from .infrastructure_errors import (
    CacheError,
    ConnectionError,
    ConstraintViolationError,
    DatabaseError,
    EmailError,
    InfrastructureError,
    PasswordError,
    RelationConstraintError,
    RepositoryError,
    TokenError,
)

__all__ = [
    "DomainError",
    "ResourceNotFoundError",
    "DuplicateResourceError",
    "BusinessRuleViolationError",
    "UserNotFoundError",
    "DriverNotFoundError",
    "CarNotFoundError",
    "BrandNotFoundError",
    "ModelNotFoundError",
    "ColorNotFoundError",
    "CityNotFoundError",
    "TravelNotFoundError",
    "InscriptionNotFoundError",
    "UserAlreadyExistsError",
    "DriverAlreadyExistsError",
    "CarAlreadyExistsError",
    "ColorAlreadyExistsError",
    "AlreadyInscribedError",
    "NoSeatsAvailableError",
    "InvalidCredentialsError",
    "ForbiddenError",
    "InfrastructureError",
    "RepositoryError",
    "DatabaseError",
    "ConnectionError",
    "RelationConstraintError",
    "ConstraintViolationError",
    "CacheError",
    "EmailError",
    "PasswordError",
    "TokenError",
]
