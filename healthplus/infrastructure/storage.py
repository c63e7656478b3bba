"""
Key/value storage backends used to externalize the current user and cart.
"""

import logging
from typing import Protocol

import redis
from redis.exceptions import ConnectionError, TimeoutError

from healthplus.config.settings import Settings

logger = logging.getLogger(__name__)


class KeyValueStorage(Protocol):
    """Minimal string key/value store."""

    def get(self, key: str) -> str | None: ...

    def set(self, key: str, value: str) -> None: ...

    def delete(self, key: str) -> None: ...


class InMemoryStorage:
    """Process-local storage. Default backend and the one used in tests."""

    def __init__(self, initial: dict[str, str] | None = None):
        self.local_storage: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> str | None:
        return self.local_storage.get(key)

    def set(self, key: str, value: str) -> None:
        self.local_storage[key] = value

    def delete(self, key: str) -> None:
        self.local_storage.pop(key, None)

    def __contains__(self, key: str) -> bool:
        return key in self.local_storage


class RedisStorage:
    """
    Redis-backed storage.

    Connection problems are logged and reported as a missing value, so a
    flaky Redis degrades to "nothing persisted" rather than breaking a workflow.
    """

    def __init__(self, client: redis.Redis, prefix: str = ""):
        self.redis_client = client
        self.prefix = prefix

    @classmethod
    def from_settings(cls, settings: Settings) -> "RedisStorage":
        client = redis.Redis(
            host=settings.REDIS_HOST,
            port=settings.REDIS_PORT,
            db=settings.REDIS_DB,
            password=settings.REDIS_PASSWORD,
            decode_responses=True,
            socket_timeout=5.0,
            socket_connect_timeout=5.0,
        )
        logger.info(f"Redis storage configured at {settings.REDIS_HOST}:{settings.REDIS_PORT}")
        return cls(client)

    def _get_key(self, key: str) -> str:
        return f"{self.prefix}:{key}" if self.prefix else key

    def get(self, key: str) -> str | None:
        try:
            data = self.redis_client.get(self._get_key(key))
        except (ConnectionError, TimeoutError) as e:
            logger.error(f"Redis unavailable while reading {key}: {e}")
            return None
        if isinstance(data, bytes):
            data = data.decode("utf-8")
        return data  # type: ignore[return-value]

    def set(self, key: str, value: str) -> None:
        try:
            self.redis_client.set(self._get_key(key), value)
        except (ConnectionError, TimeoutError) as e:
            logger.error(f"Redis unavailable while writing {key}: {e}")

    def delete(self, key: str) -> None:
        try:
            self.redis_client.delete(self._get_key(key))
        except (ConnectionError, TimeoutError) as e:
            logger.error(f"Redis unavailable while deleting {key}: {e}")


def create_storage(settings: Settings) -> KeyValueStorage:
    """Build the backend selected by ``STORAGE_BACKEND``."""
    if settings.STORAGE_BACKEND == "redis":
        return RedisStorage.from_settings(settings)
    return InMemoryStorage()
