"""Response models for the catalog admin API."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict

from catalog_admin.domain.models import CastMemberType


class _FromEntity(BaseModel):
    model_config = ConfigDict(from_attributes=True)


class CreatedResponse(BaseModel):
    """Identifier of a created or updated resource."""

    id: str


class CategoryResponse(_FromEntity):
    id: str
    name: str
    description: str | None
    is_active: bool
    created_at: datetime
    updated_at: datetime
    deleted_at: datetime | None


class CategoryListItem(_FromEntity):
    id: str
    name: str
    description: str | None
    is_active: bool
    created_at: datetime
    deleted_at: datetime | None


class GenreResponse(BaseModel):
    id: str
    name: str
    categories_id: list[str]
    is_active: bool
    created_at: datetime
    updated_at: datetime
    deleted_at: datetime | None


class GenreListItem(BaseModel):
    id: str
    name: str
    categories_id: list[str]
    is_active: bool
    created_at: datetime
    deleted_at: datetime | None


class CastMemberResponse(_FromEntity):
    id: str
    name: str
    type: CastMemberType
    created_at: datetime
    updated_at: datetime


class CastMemberListItem(_FromEntity):
    id: str
    name: str
    type: CastMemberType
    created_at: datetime
