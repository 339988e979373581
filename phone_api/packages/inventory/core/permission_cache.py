"""权限缓存：使用 Redis 或内存后端保存角色与权限的查询结果，采用滑动过期。

缓存条目写入后即视为不可变快照，未命中时整体替换，不做合并；
角色或权限变更不会主动失效缓存，最长会有一个 TTL 周期的延迟。
"""

from __future__ import annotations

import json
import threading
import time
from typing import Callable, Optional

import redis

from .config import get_settings
from .logger import logger


class PermissionCache:
    """缓存后端基类，定义读取（同时续期）、写入与删除操作。"""

    def get(self, key: str) -> Optional[list[str]]:  # pragma: no cover - interface definition
        raise NotImplementedError

    def set(self, key: str, value: list[str], ttl_seconds: int) -> None:  # pragma: no cover
        raise NotImplementedError

    def delete(self, key: str) -> None:  # pragma: no cover
        raise NotImplementedError


class RedisPermissionCache(PermissionCache):
    """基于 Redis 的缓存后端，命中时按写入时记录的 TTL 重新设置过期时间。"""

    def __init__(self, url: str) -> None:
        self._client = redis.Redis.from_url(url, decode_responses=True)
        self._client.ping()

    def get(self, key: str) -> Optional[list[str]]:
        raw = self._client.get(self._build_key(key))
        if raw is None:
            return None
        entry = json.loads(raw)
        self._client.expire(self._build_key(key), int(entry["ttl"]))
        return list(entry["value"])

    def set(self, key: str, value: list[str], ttl_seconds: int) -> None:
        payload = json.dumps({"ttl": ttl_seconds, "value": list(value)})
        self._client.set(self._build_key(key), payload, ex=ttl_seconds)

    def delete(self, key: str) -> None:
        self._client.delete(self._build_key(key))

    @staticmethod
    def _build_key(key: str) -> str:
        return f"permissions:{key}"


class InMemoryPermissionCache(PermissionCache):
    """内存后端用于测试或缺少 Redis 时的回退实现，仅在当前进程内共享。

    过期条目在读取时移除；写入时每隔 ``sweep_interval`` 秒整体清理一次，
    避免不再访问的用户键长期驻留。
    """

    def __init__(self, clock: Callable[[], float] = time.monotonic, sweep_interval: float = 60.0) -> None:
        self._store: dict[str, tuple[tuple[str, ...], int, float]] = {}
        self._lock = threading.Lock()
        self._clock = clock
        self._sweep_interval = sweep_interval
        self._next_sweep = clock() + sweep_interval

    def get(self, key: str) -> Optional[list[str]]:
        now = self._clock()
        with self._lock:
            record = self._store.get(key)
            if record is None:
                return None
            value, ttl_seconds, expires_at = record
            if expires_at <= now:
                self._store.pop(key, None)
                return None
            self._store[key] = (value, ttl_seconds, now + ttl_seconds)
            return list(value)

    def set(self, key: str, value: list[str], ttl_seconds: int) -> None:
        now = self._clock()
        with self._lock:
            if now >= self._next_sweep:
                self._sweep(now)
            self._store[key] = (tuple(value), ttl_seconds, now + ttl_seconds)

    def delete(self, key: str) -> None:
        with self._lock:
            self._store.pop(key, None)

    def size(self) -> int:
        """当前驻留的条目数（含尚未清理的过期条目）。"""
        with self._lock:
            return len(self._store)

    def _sweep(self, now: float) -> None:
        expired = [key for key, (_, _, expires_at) in self._store.items() if expires_at <= now]
        for key in expired:
            del self._store[key]
        self._next_sweep = now + self._sweep_interval


_backend: Optional[PermissionCache] = None


def _build_backend() -> PermissionCache:
    settings = get_settings()
    if settings.permission_cache_backend == "memory":
        logger.info("Permission cache initialized in memory")
        return InMemoryPermissionCache()

    try:
        backend = RedisPermissionCache(settings.redis_url)
        logger.info("Permission cache initialized with Redis at %s", settings.redis_url)
        return backend
    except redis.RedisError as exc:
        if settings.permission_cache_backend == "redis":
            raise
        logger.warning("Redis unavailable (%s), falling back to in-memory permission cache", exc)
        return InMemoryPermissionCache()


def get_permission_cache() -> PermissionCache:
    """返回进程级缓存后端，首次调用时按配置初始化。"""
    global _backend
    if _backend is None:
        _backend = _build_backend()
    return _backend
