from unittest.mock import MagicMock

import pytest

from catalog_admin.db_models import Video, VideoMedia
from catalog_admin.domain.models import (
    MediaStatus,
    UpdateMediaStatusCommand,
    VideoMediaType,
)
from catalog_admin.exceptions import NotFoundError, PersistenceError
from catalog_admin.listener.use_cases import UpdateMediaStatusUseCase


def _video_with_media() -> Video:
    video = Video(id="123", title="The Matrix", year_launched=1999)
    video.medias = [
        VideoMedia(
            id="m-video",
            video_id="123",
            media_type=VideoMediaType.VIDEO,
            resource_id="r1",
            name="matrix.mp4",
            raw_location="/raw/matrix.mp4",
            status=MediaStatus.PROCESSING,
        ),
        VideoMedia(
            id="m-trailer",
            video_id="123",
            media_type=VideoMediaType.TRAILER,
            resource_id="t1",
            name="trailer.mp4",
            raw_location="/raw/trailer.mp4",
            status=MediaStatus.PROCESSING,
        ),
    ]
    return video


@pytest.fixture
def repository():
    return MagicMock()


def test_completed_command_updates_matching_slot(repository):
    video = _video_with_media()
    repository.find_by_id.return_value = video
    command = UpdateMediaStatusCommand(
        video_id="123",
        status=MediaStatus.COMPLETED,
        resource_id="r1",
        folder="f",
        filename="a.mp4",
    )

    UpdateMediaStatusUseCase(repository).execute(command)

    repository.find_by_id.assert_called_once_with("123")
    repository.save.assert_called_once_with(video)
    media, trailer = video.medias
    assert media.status == MediaStatus.COMPLETED
    assert media.encoded_location == "f/a.mp4"
    assert media.raw_location == "/raw/matrix.mp4"
    assert trailer.status == MediaStatus.PROCESSING
    assert trailer.encoded_location == ""


def test_trailer_slot_can_be_updated(repository):
    video = _video_with_media()
    repository.find_by_id.return_value = video
    command = UpdateMediaStatusCommand(
        video_id="123",
        status=MediaStatus.COMPLETED,
        resource_id="t1",
        folder="trailers",
        filename="t.mp4",
    )

    UpdateMediaStatusUseCase(repository).execute(command)

    media, trailer = video.medias
    assert trailer.status == MediaStatus.COMPLETED
    assert trailer.encoded_location == "trailers/t.mp4"
    assert media.status == MediaStatus.PROCESSING


def test_error_command_locates_video_by_resource_id(repository):
    video = _video_with_media()
    repository.find_by_media_resource_id.return_value = video
    command = UpdateMediaStatusCommand(
        video_id=None, status=MediaStatus.ERROR, resource_id="r1"
    )

    UpdateMediaStatusUseCase(repository).execute(command)

    repository.find_by_id.assert_not_called()
    repository.find_by_media_resource_id.assert_called_once_with("r1")
    media = video.medias[0]
    assert media.status == MediaStatus.ERROR
    assert media.encoded_location == ""
    repository.save.assert_called_once_with(video)


def test_unknown_video_raises_not_found_without_write(repository):
    repository.find_by_id.return_value = None
    command = UpdateMediaStatusCommand(
        video_id="missing", status=MediaStatus.COMPLETED, resource_id="r1"
    )

    with pytest.raises(NotFoundError):
        UpdateMediaStatusUseCase(repository).execute(command)

    repository.save.assert_not_called()


def test_unknown_resource_for_error_raises_not_found(repository):
    repository.find_by_media_resource_id.return_value = None
    command = UpdateMediaStatusCommand(
        video_id=None, status=MediaStatus.ERROR, resource_id="nope"
    )

    with pytest.raises(NotFoundError):
        UpdateMediaStatusUseCase(repository).execute(command)

    repository.save.assert_not_called()


def test_unknown_media_slot_raises_not_found_without_write(repository):
    repository.find_by_id.return_value = _video_with_media()
    command = UpdateMediaStatusCommand(
        video_id="123", status=MediaStatus.COMPLETED, resource_id="other"
    )

    with pytest.raises(NotFoundError):
        UpdateMediaStatusUseCase(repository).execute(command)

    repository.save.assert_not_called()


def test_persistence_failure_propagates(repository):
    repository.find_by_id.return_value = _video_with_media()
    repository.save.side_effect = PersistenceError("Video", "123")
    command = UpdateMediaStatusCommand(
        video_id="123", status=MediaStatus.ERROR, resource_id="r1"
    )

    with pytest.raises(PersistenceError):
        UpdateMediaStatusUseCase(repository).execute(command)
