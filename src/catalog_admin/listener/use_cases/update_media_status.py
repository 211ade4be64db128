"""Applies encoder results to the media slots of a video."""

from catalog_admin.db_models import Video
from catalog_admin.domain.models import MediaStatus, UpdateMediaStatusCommand
from catalog_admin.exceptions import NotFoundError
from catalog_admin.listener.repositories import VideoRepository
from catalog_admin.logging import setup_logging

logger = setup_logging()


class UpdateMediaStatusUseCase:
    """Updates the encoding status of one media slot of a video."""

    def __init__(self, repository: VideoRepository):
        self._repository = repository

    def execute(self, command: UpdateMediaStatusCommand) -> None:
        """
        Sets the status of the media slot holding ``command.resource_id``.

        Completed media also record where the encoded file lives. The video is
        written back unconditionally, even if the slot already had the status.

        Args:
            command: The status change to apply.

        Raises:
            NotFoundError: If the video or the media slot does not exist.
            PersistenceError: If saving the video fails.
        """
        video = self._find_video(command)

        media = video.media_for(command.resource_id)
        if media is None:
            raise NotFoundError("VideoMedia", command.resource_id)

        media.status = command.status
        if command.status == MediaStatus.COMPLETED:
            media.encoded_location = command.encoded_location

        self._repository.save(video)

        logger.info(
            "Media status updated",
            extra={
                "video_id": video.id,
                "resource_id": command.resource_id,
                "media_type": media.media_type.value,
                "status": command.status.value,
            },
        )

    def _find_video(self, command: UpdateMediaStatusCommand) -> Video:
        if command.video_id is not None:
            video = self._repository.find_by_id(command.video_id)
            if video is None:
                raise NotFoundError("Video", command.video_id)
            return video

        video = self._repository.find_by_media_resource_id(command.resource_id)
        if video is None:
            raise NotFoundError("VideoMedia", command.resource_id)
        return video
