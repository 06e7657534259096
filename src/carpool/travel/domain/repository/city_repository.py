from abc import abstractmethod

from carpool.shared.domain import Page, PaginationParams, Repository, RepositoryError, Result
from carpool.travel.domain.entity import City, CreateCityData


class CityRepository(Repository[City, CreateCityData]):
    @abstractmethod
    def find_all(
        self, pagination: PaginationParams | None = None
    ) -> Result[Page[City], RepositoryError]:
        raise NotImplementedError

    @abstractmethod
    def find_by_name(self, name: str) -> Result[City | None, RepositoryError]:
        raise NotImplementedError

    @abstractmethod
    def delete(self, id: str) -> Result[None, RepositoryError]:
        raise NotImplementedError
