from .driver_repository import DriverRepository as DriverRepository
