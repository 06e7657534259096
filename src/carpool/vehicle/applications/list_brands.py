from carpool.shared.domain import Ok, Paginated, PaginationParams, RepositoryError, Result
from carpool.vehicle.domain.entity import Brand
from carpool.vehicle.domain.repository import BrandRepository


class ListBrandsUseCase:
    def __init__(self, brand_repository: BrandRepository) -> None:
        self._brand_repository = brand_repository

    def execute(
        self, pagination: PaginationParams | None = None
    ) -> Result[Paginated[Brand], RepositoryError]:
        params = pagination or PaginationParams()
        result = self._brand_repository.find_all(params)
        if not result.success:
            return result
        return Ok(Paginated.from_page(result.value, params))
