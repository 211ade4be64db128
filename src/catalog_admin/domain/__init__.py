"""Domain layer exports."""

from catalog_admin.domain.media_status_mapper import (
    map_encoder_result,
    to_update_command,
)
from catalog_admin.domain.models import (
    CastMemberType,
    EncoderCompleted,
    EncoderError,
    EncoderResult,
    MediaStatus,
    MediaStatusUpdate,
    Pagination,
    SearchQuery,
    UpdateMediaStatusCommand,
    VideoMediaType,
    VideoMessage,
    VideoMetadata,
)

__all__ = [
    "CastMemberType",
    "EncoderCompleted",
    "EncoderError",
    "EncoderResult",
    "MediaStatus",
    "MediaStatusUpdate",
    "Pagination",
    "SearchQuery",
    "UpdateMediaStatusCommand",
    "VideoMediaType",
    "VideoMessage",
    "VideoMetadata",
    "map_encoder_result",
    "to_update_command",
]
