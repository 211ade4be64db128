"""Category endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlmodel import Session as DBSession

from catalog_admin.api.dependencies import (
    get_category_repository,
    get_db_session,
    get_search_query,
)
from catalog_admin.api.repositories import CategoryRepository
from catalog_admin.api.request_models import CategoryRequest
from catalog_admin.api.response_models import (
    CategoryListItem,
    CategoryResponse,
    CreatedResponse,
)
from catalog_admin.domain.models import Pagination, SearchQuery
from catalog_admin.exceptions import DomainValidationError, NotFoundError
from catalog_admin.logging import setup_logging

logger = setup_logging()

router = APIRouter(prefix="/categories", tags=["categories"])

DBSessionDep = Annotated[DBSession, Depends(get_db_session)]


def _get_repository(db_session: DBSessionDep) -> CategoryRepository:
    """Dependency that creates a repository with an injected DB session."""
    return get_category_repository(db_session)


RepositoryDep = Annotated[CategoryRepository, Depends(_get_repository)]
SearchDep = Annotated[SearchQuery, Depends(get_search_query)]


@router.post("", status_code=status.HTTP_201_CREATED, response_model=CreatedResponse)
def create_category(body: CategoryRequest, response: Response, repo: RepositoryDep):
    """Creates a category and points the Location header at it."""
    category_id = repo.create(body.name, body.description, body.is_active)
    logger.info("Category created", extra={"category_id": category_id})
    response.headers["Location"] = f"/categories/{category_id}"
    return CreatedResponse(id=category_id)


@router.get("", response_model=Pagination[CategoryListItem])
def list_categories(repo: RepositoryDep, query: SearchDep):
    """Returns a page of categories matching the search terms."""
    try:
        return repo.list(query)
    except DomainValidationError as e:
        raise HTTPException(status_code=422, detail=e.message)


@router.get("/{category_id}", response_model=CategoryResponse)
def get_category(category_id: str, repo: RepositoryDep):
    try:
        return repo.get_by_id(category_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.put("/{category_id}", response_model=CreatedResponse)
def update_category(category_id: str, body: CategoryRequest, repo: RepositoryDep):
    try:
        updated_id = repo.update(
            category_id, body.name, body.description, body.is_active
        )
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    logger.info("Category updated", extra={"category_id": updated_id})
    return CreatedResponse(id=updated_id)


@router.delete("/{category_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_category(category_id: str, repo: RepositoryDep):
    repo.delete_by_id(category_id)
    logger.info("Category deleted", extra={"category_id": category_id})
