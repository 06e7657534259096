from .city import City as City
from .city import CreateCityData as CreateCityData
from .travel import CreateTravelData as CreateTravelData
from .travel import Travel as Travel
from .travel import TravelFilters as TravelFilters
from .travel import TravelStop as TravelStop
