from enum import Enum


class TravelCityType(str, Enum):
    """旅程における都市の役割"""

    DEPARTURE = "DEPARTURE"
    ARRIVAL = "ARRIVAL"
