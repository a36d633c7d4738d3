#!/usr/bin/env python3
"""Warm the employee cache from the remote directory API.

Run from the backend/ directory:

    python3 scripts/warm_cache.py [--dry-run] [--verbose]

Fetches the full employee list once and upserts it into the configured cache
(Cosmos DB when COSMOS_DB_ENDPOINT/COSMOS_DB_KEY are set). With --dry-run the
list is fetched but written only to a throwaway in-memory cache.
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import os
import sys

_project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if _project_root not in sys.path:
    sys.path.insert(0, _project_root)

from app.core.config import Settings  # noqa: E402
from app.core.logging import configure_logging  # noqa: E402
from app.services.cache_store import (  # noqa: E402
    EmployeeCacheStore,
    InMemoryEmployeeCache,
    build_cache_store,
)
from app.services.directory_client import DirectoryClient  # noqa: E402
from app.services.employee_service import EmployeeService  # noqa: E402

logger = logging.getLogger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Populate the employee cache from the remote directory API",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Fetch employees without writing to the configured cache",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable verbose (DEBUG) logging",
    )
    return parser.parse_args(argv)


async def warm(args: argparse.Namespace, settings: Settings | None = None) -> int:
    settings = settings or Settings()
    configure_logging(logging.DEBUG if args.verbose else settings.LOG_LEVEL)

    client = DirectoryClient.from_settings(settings)
    cache: EmployeeCacheStore
    if args.dry_run:
        cache = InMemoryEmployeeCache()
    else:
        cache = await build_cache_store(settings)

    try:
        logger.info("Warming %s cache from %s", cache.backend, client.base_url)
        service = EmployeeService(client, cache)
        count = await service.warm_cache()
    finally:
        await cache.close()

    logger.info("Cached employees: %d", count)
    if args.dry_run:
        logger.info("[DRY RUN] Nothing was written to the configured cache.")
    return count


def main() -> None:
    args = parse_args()
    asyncio.run(warm(args))


if __name__ == "__main__":
    main()
