"""
Application factory for creating the FastAPI application.
"""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Any

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from redis_console.core.app.controllers.redis_controller import (
    RedisController,
    router as redis_router,
)
from redis_console.core.app.error_handlers import configure_exception_handlers
from redis_console.core.app.middleware.logging_middleware import LoggingMiddleware
from redis_console.core.commands.dispatcher import Dispatcher
from redis_console.core.config.app_config import AppConfig
from redis_console.core.interfaces.store_client_interface import IStoreClient
from redis_console.core.services.command_service import CommandService
from redis_console.core.services.redis_store_client import RedisStoreClient

logger = logging.getLogger(__name__)


def build_app(
    config: AppConfig | dict[str, Any] | None = None,
    store: IStoreClient | None = None,
) -> FastAPI:
    """Build the FastAPI application.

    Args:
        config: The application configuration (AppConfig object or dict)
        store: Store client to use; a ``RedisStoreClient`` when omitted

    Returns:
        The FastAPI ASGI application instance.
    """
    if config is None:
        config = AppConfig.from_env()
    elif isinstance(config, dict):
        config = AppConfig(**config)

    store = store or RedisStoreClient()
    dispatcher = Dispatcher(
        store, allow_passthrough=config.interpreter.allow_passthrough
    )
    command_service = CommandService(dispatcher)
    app_config = config

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        if app_config.auto_connect:
            logger.info("Auto-connecting to store at %s", app_config.store.address)
            await store.connect(app_config.store)
        yield
        logger.info("Shutting down, closing store connection")
        await store.disconnect()

    app = FastAPI(title="Redis Web Console", lifespan=lifespan)
    app.state.app_config = config
    app.state.store = store
    app.state.redis_controller = RedisController(store, command_service)

    app.add_middleware(
        LoggingMiddleware,
        log_requests=config.logging.request_logging,
        log_responses=config.logging.response_logging,
    )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.cors.allow_origins,
        allow_methods=config.cors.allow_methods,
        allow_headers=config.cors.allow_headers,
    )
    configure_exception_handlers(app)
    app.include_router(redis_router)

    return app
