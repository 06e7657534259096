from carpool.shared.domain import Ok, Paginated, PaginationParams, RepositoryError, Result
from carpool.vehicle.domain.entity import Color
from carpool.vehicle.domain.repository import ColorRepository


class ListColorsUseCase:
    def __init__(self, color_repository: ColorRepository) -> None:
        self._color_repository = color_repository

    def execute(
        self, pagination: PaginationParams | None = None
    ) -> Result[Paginated[Color], RepositoryError]:
        params = pagination or PaginationParams()
        result = self._color_repository.find_all(params)
        if not result.success:
            return result
        return Ok(Paginated.from_page(result.value, params))
