from abc import abstractmethod

from carpool.shared.domain import Page, PaginationParams, Repository, RepositoryError, Result
from carpool.vehicle.domain.entity import Brand, CreateBrandData


class BrandRepository(Repository[Brand, CreateBrandData]):
    @abstractmethod
    def find_all(
        self, pagination: PaginationParams | None = None
    ) -> Result[Page[Brand], RepositoryError]:
        raise NotImplementedError

    @abstractmethod
    def delete(self, id: str) -> Result[None, RepositoryError]:
        """ブランドを削除する（配下の車種も削除される）"""
        raise NotImplementedError
