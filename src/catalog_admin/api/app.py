"""FastAPI application factory."""

from collections.abc import Callable
from contextlib import AbstractAsyncContextManager

from fastapi import FastAPI

from catalog_admin.api.routes import (
    cast_members_router,
    categories_router,
    genres_router,
)

Lifespan = Callable[[FastAPI], AbstractAsyncContextManager[None]]


def create_app(lifespan: Lifespan | None = None) -> FastAPI:
    app = FastAPI(title="Admin Catalog API", lifespan=lifespan)
    app.include_router(categories_router)
    app.include_router(genres_router)
    app.include_router(cast_members_router)
    return app
