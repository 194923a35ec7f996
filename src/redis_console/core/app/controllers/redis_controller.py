"""
Redis Controller

Handles the console's store endpoints: connection management, key
inspection and the command interpreter.
"""

from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, Depends, HTTPException, Query, Request
from fastapi.responses import JSONResponse

from redis_console.core.common.exceptions import ErrorKind
from redis_console.core.config.app_config import StoreConfig
from redis_console.core.domain.redis_models import (
    CommandRequest,
    ExpireRequest,
    KeyEntry,
    MessageResponse,
    SetKeyRequest,
)
from redis_console.core.interfaces.store_client_interface import IStoreClient
from redis_console.core.services.command_service import CommandService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["redis"])

# Failed commands caused by the caller's input map to 400
_FAILURE_STATUS: dict[ErrorKind, int] = {ErrorKind.STORE_ERROR: 500}


class RedisController:
    """Controller for store endpoints."""

    def __init__(self, store: IStoreClient, command_service: CommandService) -> None:
        """Initialize the controller.

        Args:
            store: The store client used by the key endpoints
            command_service: The service running raw command lines
        """
        self.store = store
        self.command_service = command_service

    async def connect(self, config: StoreConfig) -> MessageResponse:
        await self.store.connect(config)
        return MessageResponse(message="Connected successfully")

    async def disconnect(self) -> MessageResponse:
        await self.store.disconnect()
        return MessageResponse(message="Disconnected successfully")

    async def execute_command(self, request: CommandRequest) -> JSONResponse:
        result = await self.command_service.execute(request.command, request.args)
        if result.error is not None:
            status_code = _FAILURE_STATUS.get(result.error.kind, 400)
        else:
            status_code = 200
        return JSONResponse(status_code=status_code, content=result.to_response())

    async def get_keys(self, pattern: str) -> dict[str, list[str]]:
        return {"rdb_keys": sorted(await self.store.keys(pattern))}

    async def get_key(self, key: str) -> KeyEntry:
        return await self.store.get_key(key)

    async def set_key(self, request: SetKeyRequest) -> MessageResponse:
        await self.store.set(request.key, request.value, request.ttl)
        return MessageResponse(message="Key set successfully")

    async def delete_key(self, key: str) -> MessageResponse:
        await self.store.delete(key)
        return MessageResponse(message="Key deleted successfully")

    async def get_type(self, key: str) -> str:
        return await self.store.type(key)

    async def get_ttl(self, key: str) -> int:
        return await self.store.ttl(key)

    async def expire(self, request: ExpireRequest) -> MessageResponse:
        await self.store.expire(request.key, request.seconds)
        return MessageResponse(message="TTL set successfully")


def get_redis_controller(request: Request) -> RedisController:
    """Resolve the controller registered on the application state.

    Raises:
        HTTPException: If the application was built without a controller
    """
    controller = getattr(request.app.state, "redis_controller", None)
    if controller is None:
        logger.error("Redis controller is not registered on the application state")
        raise HTTPException(status_code=503, detail="Service temporarily unavailable")
    return controller  # type: ignore[no-any-return]


@router.post("/connect", response_model=MessageResponse)
async def connect(
    config: StoreConfig, controller: RedisController = Depends(get_redis_controller)
) -> MessageResponse:
    return await controller.connect(config)


@router.post("/disconnect", response_model=MessageResponse)
async def disconnect(
    controller: RedisController = Depends(get_redis_controller),
) -> MessageResponse:
    return await controller.disconnect()


@router.post("/command")
async def execute_command(
    request: CommandRequest,
    controller: RedisController = Depends(get_redis_controller),
) -> JSONResponse:
    return await controller.execute_command(request)


@router.get("/keys")
async def get_keys(
    pattern: str = Query(default="*"),
    controller: RedisController = Depends(get_redis_controller),
) -> dict[str, Any]:
    return await controller.get_keys(pattern)


@router.get("/key/{key}", response_model=KeyEntry)
async def get_key(
    key: str, controller: RedisController = Depends(get_redis_controller)
) -> KeyEntry:
    return await controller.get_key(key)


@router.post("/key", response_model=MessageResponse)
async def set_key(
    request: SetKeyRequest,
    controller: RedisController = Depends(get_redis_controller),
) -> MessageResponse:
    return await controller.set_key(request)


@router.delete("/key/{key}", response_model=MessageResponse)
async def delete_key(
    key: str, controller: RedisController = Depends(get_redis_controller)
) -> MessageResponse:
    return await controller.delete_key(key)


@router.get("/type/{key}")
async def get_type(
    key: str, controller: RedisController = Depends(get_redis_controller)
) -> str:
    return await controller.get_type(key)


@router.get("/ttl/{key}")
async def get_ttl(
    key: str, controller: RedisController = Depends(get_redis_controller)
) -> int:
    return await controller.get_ttl(key)


@router.post("/expire", response_model=MessageResponse)
async def expire(
    request: ExpireRequest,
    controller: RedisController = Depends(get_redis_controller),
) -> MessageResponse:
    return await controller.expire(request)
