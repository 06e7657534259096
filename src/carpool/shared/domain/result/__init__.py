from .result import Err as Err
from .result import Ok as Ok
from .result import Result as Result
from .result import map_err as map_err
from .result import map_ok as map_ok
from .result import unwrap as unwrap
from .result import unwrap_or as unwrap_or
