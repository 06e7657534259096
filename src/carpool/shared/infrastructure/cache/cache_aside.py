import json
from typing import Any, Callable, TypeVar

from aws_lambda_powertools import Logger
from pydantic import TypeAdapter, ValidationError
from pydantic_core import to_jsonable_python

from carpool.shared.config import CacheConfig
from carpool.shared.domain.result import Ok, Result
from carpool.shared.domain.service import CacheService

T = TypeVar("T")
E = TypeVar("E")


class CacheAside:
    """キャッシュアサイドの読み取りと、書き込み後のパターン無効化を担うヘルパー

    キャッシュリポジトリ（デコレータ）が 1 ドメインにつき 1 つ保持する。
    キャッシュ障害はログに残してミス扱いとし、呼び出し元の Result には影響させない。
    """

    def __init__(
        self,
        domain: str,
        cache: CacheService,
        config: CacheConfig,
        logger: Logger | None = None,
    ) -> None:
        self.domain = domain
        self._cache = cache
        self._config = config
        self._ttl = config.ttl.for_domain(domain)
        self._logger = logger or Logger(child=True)

    @property
    def enabled(self) -> bool:
        return self._config.enabled

    def key(self, method: str, *args: Any) -> str:
        """<prefix><domain>:<method>:<引数の JSON> 形式の決定的なキーを生成する"""
        serialized = json.dumps(
            to_jsonable_python(list(args)),
            sort_keys=True,
            separators=(",", ":"),
        )
        return f"{self._config.key_prefix}{self.domain}:{method}:{serialized}"

    def pattern(self, domain: str) -> str:
        return f"{self._config.key_prefix}{domain}:*"

    def read(
        self,
        method: str,
        args: tuple,
        adapter: TypeAdapter[T],
        source: Callable[[], Result[T, E]],
    ) -> Result[T, E]:
        if not self._config.enabled:
            return source()

        key = self.key(method, *args)
        cached = self._get(key)
        if cached is not None:
            try:
                value = adapter.validate_json(cached)
            except ValidationError:
                self._logger.warning("Discarding undecodable cache entry", extra={"key": key})
            else:
                self._logger.debug("Cache hit", extra={"key": key})
                return Ok(value)

        result = source()
        if isinstance(result, Ok):
            self._set(key, adapter, result.value)
        return result

    def invalidate(self, result: Result[Any, Any], *domains: str) -> None:
        """書き込みが成功した場合のみ、指定ドメインのキーを全て削除する"""
        if not self._config.enabled or not result.success:
            return
        for domain in domains or (self.domain,):
            pattern = self.pattern(domain)
            try:
                self._cache.delete_by_pattern(pattern)
            except Exception:
                self._logger.warning(
                    "Cache invalidation failed", extra={"pattern": pattern}, exc_info=True
                )

    def _get(self, key: str) -> str | None:
        try:
            return self._cache.get(key)
        except Exception:
            self._logger.warning(
                "Cache read failed, falling through to source",
                extra={"key": key},
                exc_info=True,
            )
            return None

    def _set(self, key: str, adapter: TypeAdapter[T], value: T) -> None:
        try:
            self._cache.set(key, adapter.dump_json(value).decode(), self._ttl)
        except Exception:
            self._logger.warning("Cache write failed", extra={"key": key}, exc_info=True)
