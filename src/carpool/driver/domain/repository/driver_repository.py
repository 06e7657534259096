from abc import abstractmethod

from carpool.driver.domain.entity import CreateDriverData, Driver
from carpool.shared.domain import Repository, RepositoryError, Result


class DriverRepository(Repository[Driver, CreateDriverData]):
    """運転者リポジトリのインターフェース"""

    @abstractmethod
    def find_by_user_id(self, user_id: str) -> Result[Driver | None, RepositoryError]:
        raise NotImplementedError
