from .exception import (
    DomainError as DomainError,
)
from .exception import (
    RepositoryError as RepositoryError,
)
from .repository import Repository as Repository
from .result import Err as Err
from .result import Ok as Ok
from .result import Result as Result
from .value_object import (
    Page as Page,
)
from .value_object import (
    Paginated as Paginated,
)
from .value_object import (
    PaginationMeta as PaginationMeta,
)
from .value_object import (
    PaginationParams as PaginationParams,
)
