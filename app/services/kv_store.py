"""Durable key-value stores for the translation cache and rate-limit state.

Every store exposes get/set/delete and swallows its own backend errors:
a full or unreachable store must never break a translation. Stores only
hold strings.
"""

import logging
from typing import Optional

from app.services.redis_client import get_redis

logger = logging.getLogger(__name__)

STORE_MEMORY = 'memory'
STORE_REDIS = 'redis'
STORE_DATABASE = 'database'


class MemoryStore:
    """Dict-backed store for tests and single-process development."""
    
    def __init__(self, initial=None):
        self._data = dict(initial or {})
    
    def get(self, key: str) -> Optional[str]:
        return self._data.get(key)
    
    def set(self, key: str, value: str) -> None:
        self._data[key] = value
    
    def delete(self, key: str) -> None:
        self._data.pop(key, None)
    
    def __contains__(self, key):
        return key in self._data
    
    def __len__(self):
        return len(self._data)


class RedisStore:
    """Store backed by a Redis connection (decode_responses=True)."""
    
    def __init__(self, client):
        self.client = client
    
    def get(self, key: str) -> Optional[str]:
        try:
            return self.client.get(key)
        except Exception as e:
            logger.debug(f"Redis store get error for {key!r}: {e}")
            return None
    
    def set(self, key: str, value: str) -> None:
        try:
            self.client.set(key, value)
        except Exception as e:
            logger.debug(f"Redis store set error for {key!r}: {e}")
    
    def delete(self, key: str) -> None:
        try:
            self.client.delete(key)
        except Exception as e:
            logger.debug(f"Redis store delete error for {key!r}: {e}")


class DatabaseStore:
    """Store backed by the kv_entries table.
    
    Must be used inside an application context.
    """
    
    def get(self, key: str) -> Optional[str]:
        try:
            from app.models import KeyValueEntry
            entry = KeyValueEntry.query.filter_by(key=key).first()
            return entry.value if entry else None
        except Exception as e:
            logger.debug(f"Database store get error for {key!r}: {e}")
            return None
    
    def set(self, key: str, value: str) -> None:
        try:
            from app.models import KeyValueEntry
            from app import db
            
            entry = KeyValueEntry.query.filter_by(key=key).first()
            if entry:
                entry.value = value
            else:
                db.session.add(KeyValueEntry(key=key, value=value))
            db.session.commit()
        except Exception as e:
            logger.debug(f"Database store set error for {key!r}: {e}")
            self._rollback()
    
    def delete(self, key: str) -> None:
        try:
            from app.models import KeyValueEntry
            from app import db
            
            KeyValueEntry.query.filter_by(key=key).delete()
            db.session.commit()
        except Exception as e:
            logger.debug(f"Database store delete error for {key!r}: {e}")
            self._rollback()
    
    @staticmethod
    def _rollback():
        try:
            from app import db
            db.session.rollback()
        except Exception as e:
            logger.debug(f"Database store rollback error: {e}")


def build_store(kind: str = STORE_DATABASE, redis_url: Optional[str] = None):
    """Create the configured store, falling back to memory when redis is unavailable."""
    kind = (kind or STORE_DATABASE).strip().lower()
    
    if kind == STORE_REDIS:
        client = get_redis(redis_url)
        if client is not None:
            return RedisStore(client)
        logger.warning("Redis unavailable - using in-process memory store for translations")
        return MemoryStore()
    
    if kind == STORE_DATABASE:
        return DatabaseStore()
    
    if kind != STORE_MEMORY:
        logger.warning(f"Unknown TRANSLATION_STORE '{kind}' - using memory store")
    return MemoryStore()
