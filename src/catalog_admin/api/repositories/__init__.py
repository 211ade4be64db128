from catalog_admin.api.repositories.cast_member_repository import (
    CastMemberRepository,
)
from catalog_admin.api.repositories.category_repository import CategoryRepository
from catalog_admin.api.repositories.genre_repository import GenreRepository

__all__ = [
    "CastMemberRepository",
    "CategoryRepository",
    "GenreRepository",
]
