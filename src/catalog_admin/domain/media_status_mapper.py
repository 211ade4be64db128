"""Maps encoder results to media status changes."""

from catalog_admin.domain.models import (
    EncoderCompleted,
    EncoderError,
    MediaStatus,
    MediaStatusUpdate,
    UpdateMediaStatusCommand,
)
from catalog_admin.exceptions import DecodingError


def map_encoder_result(result: EncoderCompleted | EncoderError) -> MediaStatusUpdate:
    """
    Classifies an encoder result into the status change it implies.

    Args:
        result: A decoded encoder completion or error.

    Returns:
        MediaStatusUpdate with the target status and the media location.
        Errors carry no folder or filename.

    Raises:
        DecodingError: If the result is not one of the two encoder variants.
    """
    if isinstance(result, EncoderCompleted):
        return MediaStatusUpdate(
            status=MediaStatus.COMPLETED,
            resource_id=result.video.resource_id,
            folder=result.video.encoder_video_folder,
            filename=result.video.file_path,
        )
    if isinstance(result, EncoderError):
        return MediaStatusUpdate(
            status=MediaStatus.ERROR,
            resource_id=result.message.resource_id,
            folder="",
            filename="",
        )
    raise DecodingError(f"unsupported encoder result {type(result).__name__}")


def to_update_command(
    result: EncoderCompleted | EncoderError,
) -> UpdateMediaStatusCommand:
    """Builds the use case command for an encoder result."""
    update = map_encoder_result(result)
    video_id = result.id if isinstance(result, EncoderCompleted) else None
    return UpdateMediaStatusCommand(
        video_id=video_id,
        status=update.status,
        resource_id=update.resource_id,
        folder=update.folder,
        filename=update.filename,
    )
