from .inscription_status import InscriptionStatus as InscriptionStatus
