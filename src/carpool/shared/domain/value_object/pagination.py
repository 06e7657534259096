from __future__ import annotations

import math
from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field

T = TypeVar("T")

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 20
MAX_LIMIT = 100


class PaginationParams(BaseModel):
    """ページング指定（page は 1 始まり）"""

    model_config = ConfigDict(frozen=True)

    page: int = Field(default=DEFAULT_PAGE, ge=1)
    limit: int = Field(default=DEFAULT_LIMIT, ge=1, le=MAX_LIMIT)

    @property
    def skip(self) -> int:
        return (self.page - 1) * self.limit

    @property
    def take(self) -> int:
        return self.limit


class Page(BaseModel, Generic[T]):
    """リポジトリの一覧取得結果（1 ページ分のデータ + 総件数）"""

    model_config = ConfigDict(frozen=True)

    data: list[T]
    total: int


class PaginationMeta(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    page: int
    limit: int
    total: int
    total_pages: int = Field(serialization_alias="totalPages")

    @classmethod
    def build(cls, params: PaginationParams, total: int) -> PaginationMeta:
        """ページング指定と総件数からメタ情報を組み立てる"""
        return cls(
            page=params.page,
            limit=params.limit,
            total=total,
            total_pages=math.ceil(total / params.limit),
        )


class Paginated(BaseModel, Generic[T]):
    """ユースケースが返す一覧レスポンス"""

    model_config = ConfigDict(frozen=True)

    data: list[T]
    meta: PaginationMeta

    @classmethod
    def from_page(cls, page: Page[T], params: PaginationParams) -> Paginated[T]:
        return cls(data=list(page.data), meta=PaginationMeta.build(params, page.total))

    @classmethod
    def slice(cls, items: list[T], params: PaginationParams) -> Paginated[T]:
        """取得済みの全件をメモリ上でページングする"""
        data = items[params.skip : params.skip + params.take]
        return cls(data=data, meta=PaginationMeta.build(params, len(items)))
