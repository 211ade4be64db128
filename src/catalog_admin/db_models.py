from datetime import datetime, timezone
from typing import List, Optional
from uuid import uuid4

from sqlmodel import Field, Relationship, SQLModel

from catalog_admin.domain.models import CastMemberType, MediaStatus, VideoMediaType


def new_id() -> str:
    return uuid4().hex


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class GenreCategory(SQLModel, table=True):
    __tablename__ = "genres_categories"

    genre_id: str = Field(foreign_key="genres.id", primary_key=True, max_length=32)
    category_id: str = Field(
        foreign_key="categories.id", primary_key=True, max_length=32
    )


class Category(SQLModel, table=True):
    __tablename__ = "categories"

    id: str = Field(default_factory=new_id, primary_key=True, max_length=32)
    name: str = Field(max_length=255, index=True)
    description: Optional[str] = Field(default=None, max_length=4000)
    is_active: bool = True
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)
    deleted_at: Optional[datetime] = None

    def activate(self) -> None:
        self.deleted_at = None
        self.is_active = True
        self.updated_at = utc_now()

    def deactivate(self) -> None:
        if self.deleted_at is None:
            self.deleted_at = utc_now()
        self.is_active = False
        self.updated_at = utc_now()


class Genre(SQLModel, table=True):
    __tablename__ = "genres"

    id: str = Field(default_factory=new_id, primary_key=True, max_length=32)
    name: str = Field(max_length=255, index=True)
    is_active: bool = True
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)
    deleted_at: Optional[datetime] = None

    categories: List[Category] = Relationship(link_model=GenreCategory)

    def activate(self) -> None:
        self.deleted_at = None
        self.is_active = True
        self.updated_at = utc_now()

    def deactivate(self) -> None:
        if self.deleted_at is None:
            self.deleted_at = utc_now()
        self.is_active = False
        self.updated_at = utc_now()


class CastMember(SQLModel, table=True):
    __tablename__ = "cast_members"

    id: str = Field(default_factory=new_id, primary_key=True, max_length=32)
    name: str = Field(max_length=255, index=True)
    type: CastMemberType
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)


class Video(SQLModel, table=True):
    __tablename__ = "videos"

    id: str = Field(default_factory=new_id, primary_key=True, max_length=32)
    title: str = Field(max_length=255)
    description: str = Field(default="", max_length=4000)
    year_launched: int
    duration: float = 0.0
    rating: Optional[str] = Field(default=None, max_length=10)
    opened: bool = False
    published: bool = False
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)

    medias: List["VideoMedia"] = Relationship(
        back_populates="video",
        sa_relationship_kwargs={"cascade": "all, delete-orphan"},
    )

    def media_for(self, resource_id: str) -> Optional["VideoMedia"]:
        """Returns the video or trailer slot holding the given resource."""
        for media in self.medias:
            if media.resource_id == resource_id:
                return media
        return None


class VideoMedia(SQLModel, table=True):
    __tablename__ = "videos_video_media"

    id: str = Field(default_factory=new_id, primary_key=True, max_length=32)
    video_id: str = Field(foreign_key="videos.id", index=True, max_length=32)
    media_type: VideoMediaType
    resource_id: str = Field(index=True, max_length=255)
    name: str = Field(max_length=255)
    raw_location: str = Field(max_length=500)
    encoded_location: str = Field(default="", max_length=500)
    status: MediaStatus = MediaStatus.PENDING

    video: Optional[Video] = Relationship(back_populates="medias")
