import redis
from aws_lambda_powertools import Logger

from carpool.shared.domain.service import CacheService

logger = Logger(child=True)

SCAN_BATCH_SIZE = 100


class RedisCacheService(CacheService):
    """Redis を使用した CacheService の具象実装"""

    def __init__(self, client: redis.Redis) -> None:
        self._client = client

    @classmethod
    def from_url(cls, url: str) -> "RedisCacheService":
        return cls(redis.Redis.from_url(url, decode_responses=True))

    def get(self, key: str) -> str | None:
        return self._client.get(key)

    def set(self, key: str, value: str, ttl_seconds: int) -> None:
        self._client.set(key, value, ex=ttl_seconds)

    def delete(self, key: str) -> None:
        self._client.delete(key)

    def delete_by_pattern(self, pattern: str) -> None:
        """SCAN で一致キーを収集し、バッチ単位でパイプライン削除する"""
        batch: list[str] = []
        for key in self._client.scan_iter(match=pattern, count=SCAN_BATCH_SIZE):
            batch.append(key)
            if len(batch) >= SCAN_BATCH_SIZE:
                self._delete_keys(batch)
                batch = []
        if batch:
            self._delete_keys(batch)

    def _delete_keys(self, keys: list[str]) -> None:
        pipeline = self._client.pipeline()
        for key in keys:
            pipeline.delete(key)
        pipeline.execute()

    def is_healthy(self) -> bool:
        try:
            return bool(self._client.ping())
        except redis.RedisError:
            logger.warning("Redis health check failed")
            return False
