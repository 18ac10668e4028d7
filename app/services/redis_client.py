"""Redis client for translation state shared across workers."""

import os
import redis
import logging

logger = logging.getLogger(__name__)

# Redis connection (lazy initialization)
_redis_client = None

def get_redis(redis_url=None):
    """Get or create Redis connection."""
    global _redis_client
    
    if _redis_client is not None:
        return _redis_client
    
    redis_url = redis_url or os.environ.get('REDIS_URL')
    
    if not redis_url:
        logger.warning("REDIS_URL not set - translation cache will not be shared across workers")
        return None
    
    try:
        _redis_client = redis.from_url(redis_url, decode_responses=True)
        # Test connection
        _redis_client.ping()
        logger.info("Redis connected successfully")
        return _redis_client
    except Exception as e:
        logger.error(f"Redis connection failed: {e}")
        _redis_client = None
        return None


def close_redis():
    """Drop the cached connection so the next get_redis() reconnects."""
    global _redis_client
    _redis_client = None
