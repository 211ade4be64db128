"""Repository for the video aggregate and its media slots."""

from sqlalchemy.orm import selectinload
from sqlmodel import select

from catalog_admin.db_models import Video, VideoMedia
from catalog_admin.exceptions import PersistenceError
from catalog_admin.logging import setup_logging

logger = setup_logging()


class VideoRepository:
    """
    Loads and stores video aggregates.

    Media slots are always loaded with their video so that callers can work on
    the aggregate after the database session is closed.
    """

    def __init__(self, session_factory):
        """
        Initializes the repository.

        Args:
            session_factory: Callable that returns a SQLModel Session context manager.
        """
        self._session_factory = session_factory

    def find_by_id(self, video_id: str) -> Video | None:
        with self._session_factory() as db_session:
            statement = (
                select(Video)
                .where(Video.id == video_id)
                .options(selectinload(Video.medias))
            )
            return db_session.exec(statement).first()

    def find_by_media_resource_id(self, resource_id: str) -> Video | None:
        """Returns the video owning a media slot with the given resource id."""
        with self._session_factory() as db_session:
            statement = (
                select(Video)
                .join(VideoMedia, VideoMedia.video_id == Video.id)
                .where(VideoMedia.resource_id == resource_id)
                .options(selectinload(Video.medias))
            )
            return db_session.exec(statement).first()

    def save(self, video: Video) -> Video:
        """
        Persists the video and its media slots in a single transaction.

        Raises:
            PersistenceError: If the write fails.
        """
        try:
            with self._session_factory() as db_session:
                merged = db_session.merge(video)
                db_session.commit()
                db_session.refresh(merged)
                # medias must be loaded before the session closes
                _ = merged.medias
                return merged
        except Exception as e:
            logger.exception("Failed to persist video", extra={"video_id": video.id})
            raise PersistenceError("Video", video.id, cause=e) from e
