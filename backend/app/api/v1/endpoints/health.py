from __future__ import annotations

from fastapi import APIRouter, Depends

from app.core.config import settings
from app.core.dependencies import get_cache_store, get_directory_client
from app.services.cache_store import EmployeeCacheStore
from app.services.directory_client import DirectoryClient

router = APIRouter(prefix="/health", tags=["health"])


@router.get("")
async def health_check(
    client: DirectoryClient = Depends(get_directory_client),  # noqa: B008
    cache: EmployeeCacheStore = Depends(get_cache_store),  # noqa: B008
):
    services: dict[str, str] = {}

    try:
        ok = await client.check_connection()
        services["directory_api"] = "ok" if ok else "error"
    except Exception:
        services["directory_api"] = "error"

    try:
        if cache.backend == "in_memory":
            services["cache"] = "in_memory"
        else:
            ok = await cache.check_connection()
            services["cache"] = "ok" if ok else "error"
    except Exception:
        services["cache"] = "error"

    all_ok = all(v in ("ok", "in_memory") for v in services.values())

    return {
        "status": "healthy" if all_ok else "degraded",
        "version": settings.APP_VERSION,
        "services": services,
    }


@router.get("/ready")
async def readiness_check():
    return {"ready": True}
