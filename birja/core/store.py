import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator
from fastapi import FastAPI
from birja.core.databases import session_manager
from birja.core.redis_cli import redis_client
from birja.core.settings import settings
from birja.models import Base

logger = logging.getLogger(__name__)


class StoreManager:
    def __init__(self,):
        self.postgres = session_manager
        self.redis = redis_client

    async def connect(self):
        if settings.DB_CREATE_ALL:
            async with self.postgres.connect() as conn:
                await conn.run_sync(Base.metadata.create_all)
            logger.info("Database tables verified")

    async def disconnect(self):
        await self.postgres.close()
        await self.redis.aclose()

_store: StoreManager | None = None


def get_store() -> StoreManager:
    if not _store:
        raise Exception("StoreManager is not initialized")
    return _store


async def connect_to_store() -> StoreManager:
    global _store

    if not _store:
        _store = StoreManager()
        await _store.connect()

    return _store


async def disconnect_from_store() -> None:
    global _store

    if _store:
        await _store.disconnect()
        _store = None


@asynccontextmanager
async def store_lifespan() -> AsyncGenerator[StoreManager, None]:
    await connect_to_store()
    try:
        yield get_store()
    finally:
        await disconnect_from_store()


@asynccontextmanager
async def lifespan(*_: FastAPI) -> AsyncGenerator[None, None]:
    logger.info("Starting birja backend")
    async with store_lifespan():
        yield
    logger.info("Shutting down...")
