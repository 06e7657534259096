from .create_inscription import CreateInscriptionInput, CreateInscriptionUseCase
from .delete_inscription import DeleteInscriptionUseCase
from .list_inscriptions import ListInscriptionsUseCase
from .list_trip_passengers import ListTripPassengersUseCase
from .list_user_inscriptions import ListUserInscriptionsUseCase

__all__ = [
    "CreateInscriptionInput",
    "CreateInscriptionUseCase",
    "DeleteInscriptionUseCase",
    "ListInscriptionsUseCase",
    "ListTripPassengersUseCase",
    "ListUserInscriptionsUseCase",
]
