from .user import CreateUserData as CreateUserData
from .user import UpdateUserData as UpdateUserData
from .user import User as User
from .user import UserCredentials as UserCredentials
from .user import anonymized_email as anonymized_email
