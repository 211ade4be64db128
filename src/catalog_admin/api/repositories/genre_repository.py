"""Repository for genre data access."""

from sqlmodel import Session as DBSession
from sqlmodel import select

from catalog_admin.api.repositories.pagination import paginate
from catalog_admin.api.response_models import GenreListItem, GenreResponse
from catalog_admin.db_models import Category, Genre
from catalog_admin.domain.models import Pagination, SearchQuery
from catalog_admin.exceptions import DomainValidationError, NotFoundError


class GenreRepository:
    """Handles all database operations for genres and their category links."""

    def __init__(self, db_session: DBSession):
        self._db = db_session

    def create(self, name: str, category_ids: list[str], is_active: bool) -> str:
        """
        Stores a new genre linked to the given categories.

        Raises:
            DomainValidationError: If any category id does not exist.
        """
        genre = Genre(name=name, categories=self._load_categories(category_ids))
        if not is_active:
            genre.deactivate()
        self._db.add(genre)
        self._db.commit()
        return genre.id

    def get_by_id(self, genre_id: str) -> GenreResponse:
        """
        Retrieves a single genre with its category ids.

        Raises:
            NotFoundError: If the genre does not exist.
        """
        genre = self._get(genre_id)
        return GenreResponse(
            id=genre.id,
            name=genre.name,
            categories_id=[c.id for c in genre.categories],
            is_active=genre.is_active,
            created_at=genre.created_at,
            updated_at=genre.updated_at,
            deleted_at=genre.deleted_at,
        )

    def update(
        self, genre_id: str, name: str, category_ids: list[str], is_active: bool
    ) -> str:
        """
        Replaces the genre's name, categories and activation state.

        Raises:
            NotFoundError: If the genre does not exist.
            DomainValidationError: If any category id does not exist.
        """
        genre = self._get(genre_id)
        categories = self._load_categories(category_ids)
        genre.name = name
        genre.categories = categories
        if is_active:
            genre.activate()
        else:
            genre.deactivate()
        self._db.add(genre)
        self._db.commit()
        return genre.id

    def delete_by_id(self, genre_id: str) -> None:
        """Deletes a genre; deleting an unknown id is a no-op."""
        genre = self._db.get(Genre, genre_id)
        if genre is None:
            return
        genre.categories = []
        self._db.delete(genre)
        self._db.commit()

    def _get(self, genre_id: str) -> Genre:
        genre = self._db.get(Genre, genre_id)
        if genre is None:
            raise NotFoundError("Genre", genre_id)
        return genre

    def _load_categories(self, category_ids: list[str]) -> list[Category]:
        ids = list(dict.fromkeys(category_ids))
        if not ids:
            return []
        categories = self._db.exec(select(Category).where(Category.id.in_(ids))).all()
        found = {c.id for c in categories}
        missing = [i for i in ids if i not in found]
        if missing:
            raise DomainValidationError(
                f"Some categories could not be found: {', '.join(missing)}"
            )
        return list(categories)

    # keep last: this name shadows the builtin for annotations that follow it
    def list(self, query: SearchQuery) -> Pagination[GenreListItem]:
        total, genres = paginate(self._db, Genre, query, [Genre.name])
        return Pagination[GenreListItem](
            current_page=query.page,
            per_page=query.per_page,
            total=total,
            items=[
                GenreListItem(
                    id=g.id,
                    name=g.name,
                    categories_id=[c.id for c in g.categories],
                    is_active=g.is_active,
                    created_at=g.created_at,
                    deleted_at=g.deleted_at,
                )
                for g in genres
            ],
        )
