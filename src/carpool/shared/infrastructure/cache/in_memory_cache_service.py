import fnmatch
import threading
import time
from typing import Callable

from carpool.shared.domain.service import CacheService


class InMemoryCacheService(CacheService):
    """プロセス内 dict を使った CacheService の具象実装

    REDIS_URL 未設定時（ローカル開発・テスト）に使用する。
    期限切れのエントリは get 時に加え、sweep_interval 秒ごとの set 時にまとめて削除する。
    """

    def __init__(
        self,
        clock: Callable[[], float] = time.monotonic,
        sweep_interval: float = 60.0,
    ) -> None:
        self._clock = clock
        self._sweep_interval = sweep_interval
        self._next_sweep = clock() + sweep_interval
        self._entries: dict[str, tuple[str, float]] = {}
        self._lock = threading.Lock()

    def get(self, key: str) -> str | None:
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                return None
            value, expires_at = entry
            if expires_at <= self._clock():
                del self._entries[key]
                return None
            return value

    def set(self, key: str, value: str, ttl_seconds: int) -> None:
        with self._lock:
            now = self._clock()
            if now >= self._next_sweep:
                self._sweep(now)
            self._entries[key] = (value, now + ttl_seconds)

    def delete(self, key: str) -> None:
        with self._lock:
            self._entries.pop(key, None)

    def delete_by_pattern(self, pattern: str) -> None:
        with self._lock:
            for key in [k for k in self._entries if fnmatch.fnmatchcase(k, pattern)]:
                del self._entries[key]

    def is_healthy(self) -> bool:
        return True

    def keys(self) -> list[str]:
        """保存中のキー一覧（期限切れを含む）"""
        with self._lock:
            return list(self._entries)

    def _sweep(self, now: float) -> None:
        # ロック取得済みの状態で呼ぶこと
        for key in [k for k, (_, expires_at) in self._entries.items() if expires_at <= now]:
            del self._entries[key]
        self._next_sweep = now + self._sweep_interval
