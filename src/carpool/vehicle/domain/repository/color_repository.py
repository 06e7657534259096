from abc import abstractmethod

from carpool.shared.domain import Page, PaginationParams, Repository, RepositoryError, Result
from carpool.vehicle.domain.entity import Color, CreateColorData, UpdateColorData


class ColorRepository(Repository[Color, CreateColorData]):
    @abstractmethod
    def find_all(
        self, pagination: PaginationParams | None = None
    ) -> Result[Page[Color], RepositoryError]:
        raise NotImplementedError

    @abstractmethod
    def find_by_name(self, name: str) -> Result[Color | None, RepositoryError]:
        raise NotImplementedError

    @abstractmethod
    def update(self, id: str, data: UpdateColorData) -> Result[Color, RepositoryError]:
        raise NotImplementedError

    @abstractmethod
    def delete(self, id: str) -> Result[None, RepositoryError]:
        raise NotImplementedError
