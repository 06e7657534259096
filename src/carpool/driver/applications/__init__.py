from .create_driver import CreateDriverInput, CreateDriverUseCase

__all__ = ["CreateDriverInput", "CreateDriverUseCase"]
