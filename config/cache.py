# config/cache.py
import logging
from typing import Optional
from redis.asyncio import Redis, from_url
from config.settings import settings

logger = logging.getLogger(__name__)

_client: Optional[Redis] = None


async def get_redis() -> Redis:
    """
    Process-wide Redis client backing both the object cache and the rate
    limiter. Raw bytes in and out: CacheRepository owns entry decoding.
    """
    global _client
    if _client is None:
        client = from_url(
            settings.REDIS_URL,
            decode_responses=False,
            socket_keepalive=True,
            socket_connect_timeout=5,
            health_check_interval=30,
        )
        # Fail fast on startup if Redis is unreachable; do not keep a dead client.
        try:
            await client.ping()
        except Exception:
            await client.aclose()
            raise
        conn = client.connection_pool.connection_kwargs
        logger.info(
            "cache.connect.ok host=%s port=%s db=%s",
            conn.get("host"),
            conn.get("port"),
            conn.get("db"),
        )
        _client = client
    return _client


async def close_redis() -> None:
    global _client
    if _client is not None:
        await _client.aclose()
        _client = None
        logger.info("cache.connect.closed")
