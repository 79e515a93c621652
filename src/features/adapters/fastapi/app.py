"""FastAPI adapter – application factory."""
from __future__ import annotations

from fastapi import FastAPI

from features.adapters.fastapi.exception_mapper import FeaturesExceptionMapper
from features.adapters.fastapi.routers import FeaturesRouter
from features.features import Features


def create_app(features: Features, prefix: str = "/features") -> FastAPI:
    """Return a FastAPI app serving *features* with error mapping installed."""
    app = FastAPI(title="features")
    FeaturesExceptionMapper().register(app)
    app.include_router(FeaturesRouter(features, prefix=prefix))
    return app


__all__ = ["create_app"]
