"""Repository for category data access."""

from sqlmodel import Session as DBSession
from sqlmodel import select

from catalog_admin.api.repositories.pagination import paginate
from catalog_admin.api.response_models import CategoryListItem, CategoryResponse
from catalog_admin.db_models import Category, GenreCategory
from catalog_admin.domain.models import Pagination, SearchQuery
from catalog_admin.exceptions import NotFoundError


class CategoryRepository:
    """
    Handles all database operations for categories.

    Encapsulates SQL queries and returns response objects,
    keeping the HTTP layer free of database concerns.
    """

    def __init__(self, db_session: DBSession):
        self._db = db_session

    def create(self, name: str, description: str | None, is_active: bool) -> str:
        """Stores a new category and returns its id."""
        category = Category(name=name, description=description)
        if not is_active:
            category.deactivate()
        self._db.add(category)
        self._db.commit()
        return category.id

    def get_by_id(self, category_id: str) -> CategoryResponse:
        """
        Retrieves a single category.

        Raises:
            NotFoundError: If the category does not exist.
        """
        return CategoryResponse.model_validate(self._get(category_id))

    def update(
        self,
        category_id: str,
        name: str,
        description: str | None,
        is_active: bool,
    ) -> str:
        """
        Replaces the category's name, description and activation state.

        Raises:
            NotFoundError: If the category does not exist.
        """
        category = self._get(category_id)
        category.name = name
        category.description = description
        if is_active:
            category.activate()
        else:
            category.deactivate()
        self._db.add(category)
        self._db.commit()
        return category.id

    def delete_by_id(self, category_id: str) -> None:
        """Deletes a category; deleting an unknown id is a no-op."""
        category = self._db.get(Category, category_id)
        if category is None:
            return
        links = self._db.exec(
            select(GenreCategory).where(GenreCategory.category_id == category_id)
        ).all()
        for link in links:
            self._db.delete(link)
        self._db.delete(category)
        self._db.commit()

    def _get(self, category_id: str) -> Category:
        category = self._db.get(Category, category_id)
        if category is None:
            raise NotFoundError("Category", category_id)
        return category

    def list(self, query: SearchQuery) -> Pagination[CategoryListItem]:
        total, categories = paginate(
            self._db, Category, query, [Category.name, Category.description]
        )
        return Pagination[CategoryListItem](
            current_page=query.page,
            per_page=query.per_page,
            total=total,
            items=[CategoryListItem.model_validate(c) for c in categories],
        )
