"""Domain models for the catalog admin services."""

from enum import Enum
from typing import Annotated, Any, Generic, Literal, TypeVar, Union

from pydantic import BaseModel, ConfigDict, Discriminator, Field, Tag
from pydantic.alias_generators import to_camel

T = TypeVar("T")


class MediaStatus(str, Enum):
    """Lifecycle of an encoding job for one media asset."""

    PENDING = "PENDING"
    PROCESSING = "PROCESSING"
    COMPLETED = "COMPLETED"
    ERROR = "ERROR"


class VideoMediaType(str, Enum):
    VIDEO = "VIDEO"
    TRAILER = "TRAILER"


class CastMemberType(str, Enum):
    ACTOR = "ACTOR"
    DIRECTOR = "DIRECTOR"


class _EncoderModel(BaseModel):
    """Base for payloads exchanged with the encoder service (camelCase on the wire)."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )


class VideoMessage(_EncoderModel):
    """Source asset submitted for encoding, echoed back by the encoder."""

    resource_id: str = Field(min_length=1)
    file_path: str


class VideoMetadata(_EncoderModel):
    """Where the encoded output of a successful job lives."""

    encoder_video_folder: str = Field(min_length=1)
    resource_id: str = Field(min_length=1)
    file_path: str = Field(min_length=1)


class EncoderCompleted(_EncoderModel):
    """Terminal-success result published by the encoder."""

    id: str
    output_bucket: str
    video: VideoMetadata


class EncoderError(_EncoderModel):
    """Terminal-failure result published by the encoder."""

    message: VideoMessage
    error: str


def encoder_result_tag(value: Any) -> str | None:
    """
    Selects the encoder result variant for a raw payload or model instance.

    An explicit ``status`` field (``COMPLETED`` or ``ERROR``, any case) wins
    when the encoder sends one; otherwise the variant is identified by its
    ``error`` or ``video`` key.
    """
    if isinstance(value, EncoderCompleted):
        return "completed"
    if isinstance(value, EncoderError):
        return "error"
    if not isinstance(value, dict):
        return None

    status = value.get("status")
    if isinstance(status, str):
        status = status.upper()
        if status == MediaStatus.COMPLETED.value:
            return "completed"
        if status == MediaStatus.ERROR.value:
            return "error"

    if "error" in value:
        return "error"
    if "video" in value:
        return "completed"
    return None


EncoderResult = Annotated[
    Union[
        Annotated[EncoderCompleted, Tag("completed")],
        Annotated[EncoderError, Tag("error")],
    ],
    Discriminator(
        encoder_result_tag,
        custom_error_type="unknown_encoder_result",
        custom_error_message="Payload is neither an encoder completion nor an encoder error",
    ),
]


class MediaStatusUpdate(BaseModel, frozen=True):
    """Status change derived from an encoder result."""

    status: MediaStatus
    resource_id: str
    folder: str
    filename: str


class UpdateMediaStatusCommand(BaseModel, frozen=True):
    """
    Instruction consumed by the media status use case.

    ``video_id`` is absent for encoder errors, which only identify the media
    by its resource id.
    """

    video_id: str | None
    status: MediaStatus
    resource_id: str
    folder: str = ""
    filename: str = ""

    @property
    def encoded_location(self) -> str:
        return f"{self.folder}/{self.filename}"


class SearchQuery(BaseModel, frozen=True):
    """Paged search parameters shared by every listing endpoint."""

    page: int = Field(default=0, ge=0)
    per_page: int = Field(default=10, ge=1, le=100)
    terms: str = ""
    sort: str = "name"
    direction: Literal["asc", "desc"] = "asc"


class Pagination(BaseModel, Generic[T]):
    """A page of results along with the total number of matches."""

    current_page: int
    per_page: int
    total: int
    items: list[T]
