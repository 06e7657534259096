from .inscription_repository import (
    SEAT_CAPACITY_CONSTRAINT as SEAT_CAPACITY_CONSTRAINT,
)
from .inscription_repository import (
    TRAVEL_REFERENCE_CONSTRAINT as TRAVEL_REFERENCE_CONSTRAINT,
)
from .inscription_repository import (
    UNIQUE_INSCRIPTION_CONSTRAINT as UNIQUE_INSCRIPTION_CONSTRAINT,
)
from .inscription_repository import InscriptionRepository as InscriptionRepository
