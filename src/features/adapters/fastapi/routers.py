"""FastAPI adapter – feature flag routes."""
from __future__ import annotations

import dataclasses
from typing import Any

from fastapi import APIRouter, Request, Response
from fastapi.responses import JSONResponse
from starlette.concurrency import run_in_threadpool

from features.engine import FeatureFlag, codec
from features.features import Features
from features.kernel.errors import AlreadyExistsError, NotFoundError

DUPLICATE_KEY_MESSAGE = "There's another feature for the same key value."


async def _decode(request: Request) -> FeatureFlag:
    return codec.loads(await request.body() or b"{}")


def FeaturesRouter(
    features: Features,
    prefix: str = "/features",
    tags: list[str] | None = None,
) -> Any:
    """Return a router exposing *features* over HTTP.

    Storage and evaluation calls are synchronous and run in the threadpool.

    Routes
    ------
    ``POST   {prefix}``                          create only, 201
    ``GET    {prefix}``                          list all flags
    ``GET    {prefix}/{key}``                    one flag
    ``PUT    {prefix}/{key}``                    create or replace
    ``DELETE {prefix}/{key}``                    204
    ``GET    {prefix}/{key}/enabled``            global answer, unscoped flags only
    ``GET    {prefix}/{key}/users/{user_id}``    per-user answer
    """
    router = APIRouter(prefix=prefix, tags=tags or ["features"])

    @router.post("")
    async def create_feature(request: Request) -> JSONResponse:
        flag = await _decode(request)
        features.valid(flag)
        try:
            await run_in_threadpool(features.find, flag.key)
        except NotFoundError:
            pass
        else:
            raise AlreadyExistsError(flag.key, DUPLICATE_KEY_MESSAGE)
        await run_in_threadpool(features.save, flag)
        return JSONResponse(status_code=201, content=codec.to_dict(flag))

    @router.get("")
    async def list_features() -> JSONResponse:
        flags = await run_in_threadpool(features.find_all)
        return JSONResponse(content=[codec.to_dict(f) for f in sorted(flags, key=lambda f: f.key)])

    @router.get("/{key}")
    async def get_feature(key: str) -> JSONResponse:
        flag = await run_in_threadpool(features.find, key)
        return JSONResponse(content=codec.to_dict(flag))

    @router.put("/{key}")
    async def replace_feature(key: str, request: Request) -> JSONResponse:
        flag = dataclasses.replace(await _decode(request), key=key)
        await run_in_threadpool(features.save, flag)
        return JSONResponse(content=codec.to_dict(flag))

    @router.delete("/{key}")
    async def delete_feature(key: str) -> Response:
        await run_in_threadpool(features.delete, key)
        return Response(status_code=204)

    @router.get("/{key}/enabled")
    async def feature_enabled(key: str) -> dict[str, bool]:
        return {"enabled": await run_in_threadpool(features.is_enabled, key)}

    @router.get("/{key}/users/{user_id}")
    async def user_access(key: str, user_id: str) -> dict[str, bool]:
        return {"access": await run_in_threadpool(features.user_has_access, key, user_id)}

    return router


__all__ = ["DUPLICATE_KEY_MESSAGE", "FeaturesRouter"]
