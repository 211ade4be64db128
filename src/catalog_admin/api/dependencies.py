"""FastAPI dependency injection configuration."""

from functools import lru_cache
from typing import Annotated, Generator

from fastapi import HTTPException, Query
from sqlalchemy.engine import Engine
from sqlmodel import Session as DBSession
from sqlmodel import create_engine

from catalog_admin.api.repositories import (
    CastMemberRepository,
    CategoryRepository,
    GenreRepository,
)
from catalog_admin.config import load_config
from catalog_admin.domain.models import SearchQuery


@lru_cache
def get_engine() -> Engine:
    """Returns the process-wide database engine."""
    database = load_config().database
    return create_engine(database.url, echo=database.echo)


def get_db_session() -> Generator[DBSession, None, None]:
    """Yields a database session, ensuring proper cleanup."""
    with DBSession(get_engine()) as session:
        yield session


def get_category_repository(db_session: DBSession) -> CategoryRepository:
    return CategoryRepository(db_session)


def get_genre_repository(db_session: DBSession) -> GenreRepository:
    return GenreRepository(db_session)


def get_cast_member_repository(db_session: DBSession) -> CastMemberRepository:
    return CastMemberRepository(db_session)


def get_search_query(
    page: Annotated[int, Query(ge=0)] = 0,
    per_page: Annotated[int, Query(alias="perPage", ge=1, le=100)] = 10,
    search: str = "",
    sort: str = "name",
    direction: Annotated[str, Query(alias="dir")] = "asc",
) -> SearchQuery:
    """
    Collects the paging and search query parameters of a listing request.

    Blank ``sort`` and ``dir`` values fall back to ``name`` and ``asc``.
    """
    direction = direction.strip().lower() or "asc"
    if direction not in ("asc", "desc"):
        raise HTTPException(
            status_code=422, detail=f"Unsupported sort direction '{direction}'"
        )
    return SearchQuery(
        page=page,
        per_page=per_page,
        terms=search,
        sort=sort.strip() or "name",
        direction=direction,
    )
