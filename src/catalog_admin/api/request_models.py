"""Request bodies accepted by the catalog admin API."""

from pydantic import BaseModel, Field, field_validator

from catalog_admin.domain.models import CastMemberType


def _not_blank(value: str) -> str:
    if not value.strip():
        raise ValueError("'name' should not be empty")
    return value


class CategoryRequest(BaseModel):
    """Body for creating or updating a category."""

    name: str = Field(min_length=3, max_length=255)
    description: str | None = Field(default=None, max_length=4000)
    is_active: bool = True

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, value: str) -> str:
        return _not_blank(value)


class GenreRequest(BaseModel):
    """Body for creating or updating a genre."""

    name: str = Field(min_length=1, max_length=255)
    categories_id: list[str] = Field(default_factory=list)
    is_active: bool = True

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, value: str) -> str:
        return _not_blank(value)


class CastMemberRequest(BaseModel):
    """Body for creating or updating a cast member."""

    name: str = Field(min_length=3, max_length=255)
    type: CastMemberType

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, value: str) -> str:
        return _not_blank(value)
