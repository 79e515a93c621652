"""FastAPI adapter – feature flag routes, exception mapper, app factory."""
from features.adapters.fastapi.app import create_app
from features.adapters.fastapi.exception_mapper import FeaturesExceptionMapper, error_body
from features.adapters.fastapi.routers import DUPLICATE_KEY_MESSAGE, FeaturesRouter

__all__ = [
    "DUPLICATE_KEY_MESSAGE",
    "FeaturesExceptionMapper",
    "FeaturesRouter",
    "create_app",
    "error_body",
]
