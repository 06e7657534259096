from .login import LoginInput, LoginUseCase
from .register import RegisterInput, RegisterUseCase

__all__ = ["LoginInput", "LoginUseCase", "RegisterInput", "RegisterUseCase"]
