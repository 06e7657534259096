from .driver import CreateDriverData as CreateDriverData
from .driver import Driver as Driver
