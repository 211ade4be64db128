"""Cast member endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlmodel import Session as DBSession

from catalog_admin.api.dependencies import (
    get_cast_member_repository,
    get_db_session,
    get_search_query,
)
from catalog_admin.api.repositories import CastMemberRepository
from catalog_admin.api.request_models import CastMemberRequest
from catalog_admin.api.response_models import (
    CastMemberListItem,
    CastMemberResponse,
    CreatedResponse,
)
from catalog_admin.domain.models import Pagination, SearchQuery
from catalog_admin.exceptions import DomainValidationError, NotFoundError
from catalog_admin.logging import setup_logging

logger = setup_logging()

router = APIRouter(prefix="/cast_members", tags=["cast members"])

DBSessionDep = Annotated[DBSession, Depends(get_db_session)]


def _get_repository(db_session: DBSessionDep) -> CastMemberRepository:
    return get_cast_member_repository(db_session)


RepositoryDep = Annotated[CastMemberRepository, Depends(_get_repository)]
SearchDep = Annotated[SearchQuery, Depends(get_search_query)]


@router.post("", status_code=status.HTTP_201_CREATED, response_model=CreatedResponse)
def create_cast_member(
    body: CastMemberRequest, response: Response, repo: RepositoryDep
):
    member_id = repo.create(body.name, body.type)
    logger.info("Cast member created", extra={"cast_member_id": member_id})
    response.headers["Location"] = f"/cast_members/{member_id}"
    return CreatedResponse(id=member_id)


@router.get("", response_model=Pagination[CastMemberListItem])
def list_cast_members(repo: RepositoryDep, query: SearchDep):
    try:
        return repo.list(query)
    except DomainValidationError as e:
        raise HTTPException(status_code=422, detail=e.message)


@router.get("/{member_id}", response_model=CastMemberResponse)
def get_cast_member(member_id: str, repo: RepositoryDep):
    try:
        return repo.get_by_id(member_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.put("/{member_id}", response_model=CreatedResponse)
def update_cast_member(member_id: str, body: CastMemberRequest, repo: RepositoryDep):
    try:
        updated_id = repo.update(member_id, body.name, body.type)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    logger.info("Cast member updated", extra={"cast_member_id": updated_id})
    return CreatedResponse(id=updated_id)


@router.delete("/{member_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_cast_member(member_id: str, repo: RepositoryDep):
    repo.delete_by_id(member_id)
    logger.info("Cast member deleted", extra={"cast_member_id": member_id})
