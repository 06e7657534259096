from abc import abstractmethod

from carpool.shared.domain import Page, PaginationParams, Repository, RepositoryError, Result
from carpool.vehicle.domain.entity import Car, CreateCarData, UpdateCarData


class CarRepository(Repository[Car, CreateCarData]):
    """車両リポジトリのインターフェース"""

    @abstractmethod
    def find_all(
        self, pagination: PaginationParams | None = None
    ) -> Result[Page[Car], RepositoryError]:
        raise NotImplementedError

    @abstractmethod
    def exists_by_license_plate(self, license_plate: str) -> Result[bool, RepositoryError]:
        raise NotImplementedError

    @abstractmethod
    def update(self, id: str, data: UpdateCarData) -> Result[Car, RepositoryError]:
        raise NotImplementedError

    @abstractmethod
    def delete(self, id: str) -> Result[None, RepositoryError]:
        """旅程から参照されている場合は RelationConstraintError"""
        raise NotImplementedError
