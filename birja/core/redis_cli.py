import redis.asyncio as redis

from birja.core.settings import settings

redis_client = redis.Redis.from_url(
    settings.get_redis_url,
    decode_responses=True,
    socket_connect_timeout=2,
)


async def get_redis_client():
    return redis_client
