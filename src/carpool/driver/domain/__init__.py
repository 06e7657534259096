from .entity import CreateDriverData as CreateDriverData
from .entity import Driver as Driver
from .repository import DriverRepository as DriverRepository
