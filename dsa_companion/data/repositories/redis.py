from functools import lru_cache
from typing import Optional

from redis.asyncio import Redis
from redis.exceptions import RedisError

from dsa_companion.config import Config, logger

redis_logger = logger.getChild("redis")


class RedisClient:
    """Thin wrapper over redis.asyncio used for request counters."""

    def __init__(self, redis: Redis):
        self.redis = redis

    async def hit(self, key: str, window: int) -> Optional[int]:
        """
        Count one request against a fixed window and return the new total.

        INCR and EXPIRE run in one transaction. NX keeps an existing expiry,
        so the window does not slide, and a key left without one gets it on
        the next hit. Returns None when Redis is unreachable.
        """
        try:
            pipe = self.redis.pipeline(transaction=True)
            pipe.incr(key)
            pipe.expire(key, window, nx=True)
            count, _ = await pipe.execute()
            return count
        except RedisError as e:
            redis_logger.error(f"Redis operation failed: {str(e)}")
            return None

    async def close(self) -> None:
        await self.redis.aclose()


@lru_cache
def get_redis_client() -> Optional[RedisClient]:
    if not Config.REDIS_URL:
        return None
    return RedisClient(Redis.from_url(Config.REDIS_URL, decode_responses=True))
