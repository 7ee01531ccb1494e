"""
Key/value codecs.

redis-py encodes outgoing arguments with ``encoding``/``encoding_errors`` and
decodes replies only when ``decode_responses`` is set, so a codec here is just
the set of those keyword arguments.
"""

from dataclasses import dataclass
from typing import Any, Dict

from redis_ops.config.settings import CodecType
from redis_ops.redis_ops_exceptions import ConfigurationError


@dataclass(frozen=True)
class RedisCodec:
    """Serialization strategy applied to every connection a manager opens."""
    name: str
    encoding: str = "utf-8"
    encoding_errors: str = "strict"
    decode_responses: bool = True

    def to_connection_kwargs(self) -> Dict[str, Any]:
        return {
            "encoding": self.encoding,
            "encoding_errors": self.encoding_errors,
            "decode_responses": self.decode_responses,
        }

    @classmethod
    def for_type(cls, codec_type: CodecType) -> "RedisCodec":
        """
        Return the preset codec for a configured ``CodecType``.

        Raises:
            ConfigurationError: If the codec type is unknown
        """
        try:
            return _CODECS[CodecType(codec_type)]
        except ValueError as e:
            raise ConfigurationError(f"Unknown codec type: {codec_type!r}") from e


STRING_CODEC = RedisCodec(name=CodecType.STRING.value)
BYTES_CODEC = RedisCodec(name=CodecType.BYTES.value, decode_responses=False)

_CODECS = {
    CodecType.STRING: STRING_CODEC,
    CodecType.BYTES: BYTES_CODEC,
}
