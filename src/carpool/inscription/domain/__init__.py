from .entity import CreateInscriptionData as CreateInscriptionData
from .entity import Inscription as Inscription
from .enum import InscriptionStatus as InscriptionStatus
from .repository import InscriptionRepository as InscriptionRepository
