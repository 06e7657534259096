from .inscription import CreateInscriptionData as CreateInscriptionData
from .inscription import Inscription as Inscription
