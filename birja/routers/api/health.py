import logging
import time
from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from redis.exceptions import RedisError
from birja.core.redis_cli import get_redis_client

logger = logging.getLogger(__name__)

health_router = APIRouter(prefix='/api/health', tags=["HEALTH"])


@health_router.get('')
async def health_check():
    return {'status': 'ok'}


@health_router.get('/redis')
async def redis_health(redis_client=Depends(get_redis_client)):
    start = time.perf_counter()
    try:
        pong = await redis_client.ping()
    except (RedisError, OSError) as e:
        logger.warning("Redis ping failed: %s", e)
        return JSONResponse(status_code=500, content={'status': 'error', 'error': 'Redis not available'})
    return {'status': 'ok', 'pong': pong, 'ms': round((time.perf_counter() - start) * 1000, 2)}
