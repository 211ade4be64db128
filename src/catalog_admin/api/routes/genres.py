"""Genre endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlmodel import Session as DBSession

from catalog_admin.api.dependencies import (
    get_db_session,
    get_genre_repository,
    get_search_query,
)
from catalog_admin.api.repositories import GenreRepository
from catalog_admin.api.request_models import GenreRequest
from catalog_admin.api.response_models import (
    CreatedResponse,
    GenreListItem,
    GenreResponse,
)
from catalog_admin.domain.models import Pagination, SearchQuery
from catalog_admin.exceptions import DomainValidationError, NotFoundError
from catalog_admin.logging import setup_logging

logger = setup_logging()

router = APIRouter(prefix="/genres", tags=["genres"])

DBSessionDep = Annotated[DBSession, Depends(get_db_session)]


def _get_repository(db_session: DBSessionDep) -> GenreRepository:
    """Dependency that creates a repository with an injected DB session."""
    return get_genre_repository(db_session)


RepositoryDep = Annotated[GenreRepository, Depends(_get_repository)]
SearchDep = Annotated[SearchQuery, Depends(get_search_query)]


@router.post("", status_code=status.HTTP_201_CREATED, response_model=CreatedResponse)
def create_genre(body: GenreRequest, response: Response, repo: RepositoryDep):
    """Creates a genre linked to existing categories."""
    try:
        genre_id = repo.create(body.name, body.categories_id, body.is_active)
    except DomainValidationError as e:
        logger.warning("Genre rejected", extra={"reason": e.message})
        raise HTTPException(status_code=422, detail=e.message)
    logger.info("Genre created", extra={"genre_id": genre_id})
    response.headers["Location"] = f"/genres/{genre_id}"
    return CreatedResponse(id=genre_id)


@router.get("", response_model=Pagination[GenreListItem])
def list_genres(repo: RepositoryDep, query: SearchDep):
    try:
        return repo.list(query)
    except DomainValidationError as e:
        raise HTTPException(status_code=422, detail=e.message)


@router.get("/{genre_id}", response_model=GenreResponse)
def get_genre(genre_id: str, repo: RepositoryDep):
    try:
        return repo.get_by_id(genre_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.put("/{genre_id}", response_model=CreatedResponse)
def update_genre(genre_id: str, body: GenreRequest, repo: RepositoryDep):
    try:
        updated_id = repo.update(
            genre_id, body.name, body.categories_id, body.is_active
        )
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except DomainValidationError as e:
        raise HTTPException(status_code=422, detail=e.message)
    logger.info("Genre updated", extra={"genre_id": updated_id})
    return CreatedResponse(id=updated_id)


@router.delete("/{genre_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_genre(genre_id: str, repo: RepositoryDep):
    repo.delete_by_id(genre_id)
    logger.info("Genre deleted", extra={"genre_id": genre_id})
