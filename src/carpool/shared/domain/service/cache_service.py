from abc import ABC, abstractmethod


class CacheService(ABC):
    """キー・バリュー型キャッシュのインターフェース

    値は文字列（JSON）で保持し、シリアライズは呼び出し側が担う。
    バックエンド障害時は例外を送出してよい（呼び出し側でミス扱いにする）。
    """

    @abstractmethod
    def get(self, key: str) -> str | None:
        """キーに対応する値を返す。存在しない場合は None"""
        raise NotImplementedError

    @abstractmethod
    def set(self, key: str, value: str, ttl_seconds: int) -> None:
        """TTL（秒）付きで値を保存する"""
        raise NotImplementedError

    @abstractmethod
    def delete(self, key: str) -> None:
        raise NotImplementedError

    @abstractmethod
    def delete_by_pattern(self, pattern: str) -> None:
        """glob パターン（例: "carpool:travel:*"）に一致するキーを全て削除する"""
        raise NotImplementedError

    @abstractmethod
    def is_healthy(self) -> bool:
        raise NotImplementedError
