from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from app.api.v1.router import api_router
from app.core.config import settings
from app.core.logging import configure_logging
from app.services.cache_store import InMemoryEmployeeCache, build_cache_store
from app.services.directory_client import DirectoryClient
from app.services.employee_service import EmployeeService

configure_logging(settings.LOG_LEVEL)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(application: FastAPI) -> AsyncIterator[None]:
    client = DirectoryClient.from_settings(settings)
    try:
        cache = await build_cache_store(settings)
    except Exception:
        logger.exception("Failed to initialize Cosmos DB cache, continuing with in-memory cache")
        cache = InMemoryEmployeeCache()

    service = EmployeeService(client, cache, top_earners_limit=settings.TOP_EARNERS_LIMIT)
    application.state.directory_client = client
    application.state.cache_store = cache
    application.state.employee_service = service

    if settings.CACHE_WARM_ON_STARTUP:
        try:
            await service.warm_cache()
        except Exception:
            logger.exception("Cache warm-up failed, continuing with a cold cache")

    yield

    await cache.close()
    application.state.employee_service = None
    application.state.directory_client = None
    application.state.cache_store = None


app = FastAPI(
    title="Employee Directory API",
    description="Employee directory backed by a remote API with a durable cache fallback",
    version=settings.APP_VERSION,
    lifespan=lifespan,
)

app.include_router(api_router)


@app.get("/")
async def root():
    return {"message": "Employee Directory API"}
