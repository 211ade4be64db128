"""JSON serialization service for queue payloads."""

from pydantic import BaseModel, TypeAdapter, ValidationError

from catalog_admin.domain.models import EncoderCompleted, EncoderError, EncoderResult
from catalog_admin.exceptions import DecodingError


class JsonSerializer:
    """
    Encodes and decodes the JSON payloads exchanged with the encoder service.

    Passed explicitly to whatever needs it rather than used as a global helper.
    """

    def __init__(self):
        self._encoder_result_adapter = TypeAdapter(EncoderResult)

    def encode(self, model: BaseModel) -> bytes:
        """Serializes a model to UTF-8 JSON using its wire aliases."""
        return model.model_dump_json(by_alias=True).encode("utf-8")

    def decode_encoder_result(
        self, body: bytes | str
    ) -> EncoderCompleted | EncoderError:
        """
        Decodes a raw queue message into an encoder result variant.

        Args:
            body: The raw UTF-8 JSON message body.

        Returns:
            EncoderCompleted or EncoderError.

        Raises:
            DecodingError: If the body is not valid JSON or matches neither variant.
        """
        try:
            return self._encoder_result_adapter.validate_json(body)
        except ValidationError as e:
            raise DecodingError(str(e), cause=e) from e
