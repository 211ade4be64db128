"""FastAPI application entry point."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import uvicorn
from ddtrace import patch_all
from fastapi import FastAPI
from sqlmodel import SQLModel

from catalog_admin import db_models  # noqa: F401  registers tables
from catalog_admin.api.app import create_app
from catalog_admin.api.dependencies import get_engine
from catalog_admin.config import load_config
from catalog_admin.logging import setup_logging

logger = setup_logging()
patch_all()


@asynccontextmanager
async def lifespan(_app: FastAPI) -> AsyncIterator[None]:
    """Creates the catalog tables before the first request is served."""
    SQLModel.metadata.create_all(get_engine())
    logger.info("Database initialized")
    yield


app = create_app(lifespan=lifespan)


def run():
    """Serves the API with uvicorn."""
    api = load_config().api
    uvicorn.run(app, host=api.host, port=api.port, log_config=None)
