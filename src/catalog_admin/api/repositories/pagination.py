"""Paged search helper shared by the catalog repositories."""

from typing import Any, Sequence

from sqlalchemy import func, or_
from sqlmodel import Session as DBSession
from sqlmodel import select

from catalog_admin.domain.models import SearchQuery
from catalog_admin.exceptions import DomainValidationError

SORT_ALIASES = {
    "name": "name",
    "createdAt": "created_at",
    "created_at": "created_at",
}


def paginate(
    db: DBSession,
    entity: Any,
    query: SearchQuery,
    search_columns: Sequence[Any],
) -> tuple[int, list[Any]]:
    """
    Runs a case-insensitive search over ``search_columns`` and returns one page.

    Args:
        db: Open database session.
        entity: The SQLModel table class to query.
        query: Page, size, terms, sort and direction.
        search_columns: Columns matched against the search terms.

    Returns:
        Tuple of (total matches, entities on the requested page).

    Raises:
        DomainValidationError: If the sort field is not supported.
    """
    sort_field = SORT_ALIASES.get(query.sort)
    if sort_field is None:
        raise DomainValidationError(f"Unsupported sort field '{query.sort}'")

    statement = select(entity)
    terms = query.terms.strip()
    if terms:
        pattern = f"%{terms}%"
        statement = statement.where(
            or_(*(column.ilike(pattern) for column in search_columns))
        )

    total = db.exec(
        select(func.count()).select_from(statement.subquery())
    ).one()

    sort_column = getattr(entity, sort_field)
    order = sort_column.desc() if query.direction == "desc" else sort_column.asc()
    statement = (
        statement.order_by(order)
        .offset(query.page * query.per_page)
        .limit(query.per_page)
    )
    return total, list(db.exec(statement).all())
