from abc import abstractmethod

from carpool.shared.domain import Repository, RepositoryError, Result
from carpool.vehicle.domain.entity import CreateModelData, Model


class ModelRepository(Repository[Model, CreateModelData]):
    @abstractmethod
    def find_all(self) -> Result[list[Model], RepositoryError]:
        raise NotImplementedError

    @abstractmethod
    def find_by_name_and_brand(
        self, name: str, brand_id: str
    ) -> Result[Model | None, RepositoryError]:
        raise NotImplementedError
