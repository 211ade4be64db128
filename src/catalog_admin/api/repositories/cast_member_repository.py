"""Repository for cast member data access."""

from sqlmodel import Session as DBSession

from catalog_admin.api.repositories.pagination import paginate
from catalog_admin.api.response_models import CastMemberListItem, CastMemberResponse
from catalog_admin.db_models import CastMember, utc_now
from catalog_admin.domain.models import CastMemberType, Pagination, SearchQuery
from catalog_admin.exceptions import NotFoundError


class CastMemberRepository:
    """Handles all database operations for cast members."""

    def __init__(self, db_session: DBSession):
        self._db = db_session

    def create(self, name: str, member_type: CastMemberType) -> str:
        member = CastMember(name=name, type=member_type)
        self._db.add(member)
        self._db.commit()
        return member.id

    def get_by_id(self, member_id: str) -> CastMemberResponse:
        """
        Retrieves a single cast member.

        Raises:
            NotFoundError: If the cast member does not exist.
        """
        return CastMemberResponse.model_validate(self._get(member_id))

    def update(self, member_id: str, name: str, member_type: CastMemberType) -> str:
        member = self._get(member_id)
        member.name = name
        member.type = member_type
        member.updated_at = utc_now()
        self._db.add(member)
        self._db.commit()
        return member.id

    def delete_by_id(self, member_id: str) -> None:
        member = self._db.get(CastMember, member_id)
        if member is None:
            return
        self._db.delete(member)
        self._db.commit()

    def _get(self, member_id: str) -> CastMember:
        member = self._db.get(CastMember, member_id)
        if member is None:
            raise NotFoundError("CastMember", member_id)
        return member

    def list(self, query: SearchQuery) -> Pagination[CastMemberListItem]:
        total, members = paginate(self._db, CastMember, query, [CastMember.name])
        return Pagination[CastMemberListItem](
            current_page=query.page,
            per_page=query.per_page,
            total=total,
            items=[CastMemberListItem.model_validate(m) for m in members],
        )
