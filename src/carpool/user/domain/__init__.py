from .entity import CreateUserData as CreateUserData
from .entity import UpdateUserData as UpdateUserData
from .entity import User as User
from .entity import UserCredentials as UserCredentials
from .enum import UserRole as UserRole
from .repository import UserRepository as UserRepository
