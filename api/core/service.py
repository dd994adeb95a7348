"""
Process-wide service wiring: clock + config + storage, built once at startup
and handed to request handlers through `get_service`.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from fastapi import Request

from core.clock import Clock, SystemClock
from core.config import AppConfig, ConfigError, PostgresConfig
from storage.base import Storage
from storage.invalid import InvalidStorage
from storage.postgres import PostgresStorage

logger = logging.getLogger(__name__)

PROVIDER_POSTGRES = "postgres"


@dataclass(frozen=True)
class Service:
    clock: Clock
    config: AppConfig
    storage: Storage


async def build_storage(config: AppConfig) -> Storage:
    """
    Pick the backend named by `STORAGE_PROVIDER`.

    Never raises: a bad or missing provider yields an `InvalidStorage` that
    reports the problem on every request.
    """
    if config.provider == PROVIDER_POSTGRES:
        try:
            pg_config = PostgresConfig.from_env()
            logger.info("postgres_config %s", pg_config.masked())
            return await PostgresStorage.from_config(pg_config)
        except ConfigError as exc:
            return InvalidStorage(f"Invalid postgres storage provider! {exc}")
        except Exception as exc:
            logger.exception("postgres_pool_failed")
            return InvalidStorage(f"Invalid postgres storage provider! Failed creating pool: {exc}")

    return InvalidStorage(f"Invalid or no storage provider given! '{config.provider}'")


async def build_service(clock: Clock | None = None) -> Service:
    config = AppConfig.from_env()
    logger.info("config provider=%r host=%s port=%s", config.provider, config.host, config.port)

    storage = await build_storage(config)
    logger.info("created storage: %s", storage.name)
    if isinstance(storage, InvalidStorage):
        logger.warning("storage_unavailable error=%s", storage.error)

    return Service(clock=clock or SystemClock(), config=config, storage=storage)


def get_service(request: Request) -> Service:
    return request.app.state.service
