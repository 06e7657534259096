from .user_role import UserRole as UserRole
