"""
Record Codec
============

Bounded Context: Binary Serialization

Encodes generated records and enumerations to CDR bytes and back.

Responsibilities:
- Drive each type's write_cdr()/read_cdr() over a configured stream
- Resolve scoped type names through the schema registry
- Enforce the trailing-byte policy
- Structured logging of every success (DEBUG) and failure (ERROR)
- NOT responsible for: field layout (owned by each record)

Example:
    >>> from idl_records import CdrCodec, Point
    >>> codec = CdrCodec()
    >>> payload = codec.encode(Point(1, 2))
    >>> codec.decode(Point, payload)
    Point(x=1, y=2)
    >>> codec.decode("Shapes::Point", payload)
    Point(x=1, y=2)
"""

from enum import Enum
from typing import Any, Optional, Type, Union

from .cdr.stream import CdrError, CdrReader, CdrWriter
from .config import CodecConfig, RecordsConfig
from .logging import LogEvent, StructuredLogger, create_logger
from .schemas import lookup_type


class CdrCodec:
    """
    CDR encoder/decoder for generated types.

    Attributes:
        config: Codec settings
        logger: Structured logger instance

    Thread Safety:
        Stateless apart from the logger; safe to share.
    """

    def __init__(
        self,
        config: Optional[CodecConfig] = None,
        logger: Optional[StructuredLogger] = None
    ):
        self.config = config or CodecConfig()
        self.logger = logger or create_logger("codec")

    @classmethod
    def from_config(cls, config: RecordsConfig) -> 'CdrCodec':
        """Build a codec and its logger from top-level configuration."""
        logger = create_logger(
            config.logging.component,
            level=config.logging.level_value
        )
        return cls(config=config.codec, logger=logger)

    def _writer(self) -> CdrWriter:
        return CdrWriter(
            byte_order=self.config.byte_order,
            encoding=self.config.encoding
        )

    def _reader(self, data: bytes) -> CdrReader:
        return CdrReader(
            data,
            byte_order=self.config.byte_order,
            encoding=self.config.encoding,
            max_string_length=self.config.max_string_length,
            max_sequence_length=self.config.max_sequence_length
        )

    def encode(self, value: Any) -> bytes:
        """
        Encode a record or enumeration member.

        Args:
            value: Instance of a generated type

        Returns:
            CDR bytes

        Raises:
            CdrError: If the value is not a generated type or a field does
                not fit its wire type
        """
        type_name = getattr(value, 'TYPE_NAME', type(value).__name__)
        writer = self._writer()
        try:
            if isinstance(value, Enum):
                writer.write_enum(value)
            elif hasattr(value, 'write_cdr'):
                value.write_cdr(writer)
            else:
                raise CdrError(
                    f"Cannot encode {type(value).__name__}: not a generated type"
                )
        except CdrError as e:
            self.logger.error(
                event=LogEvent.SERIALIZATION_ERROR,
                message=f"Failed to encode {type_name}",
                exc_info=e,
                metadata={'type_name': type_name}
            )
            raise

        payload = writer.getvalue()
        self.logger.debug(
            event=LogEvent.CDR_ENCODED,
            message=f"Encoded {type_name}",
            metadata={'type_name': type_name, 'size': len(payload)}
        )
        return payload

    def decode(self, target: Union[Type[Any], str], data: bytes) -> Any:
        """
        Decode bytes into a generated type.

        Args:
            target: Generated class or its IDL scoped name
            data: CDR bytes

        Returns:
            Decoded instance

        Raises:
            KeyError: If target is an unknown scoped name
            CdrError: If data is not bytes-like, truncated, malformed, or
                (unless allow_trailing_bytes) longer than the value
        """
        cls = lookup_type(target) if isinstance(target, str) else target
        type_name = getattr(cls, 'TYPE_NAME', cls.__name__)
        if not isinstance(data, (bytes, bytearray, memoryview)):
            error = CdrError(
                f"Cannot decode {type_name} from {type(data).__name__}: "
                f"expected bytes"
            )
            self.logger.error(
                event=LogEvent.DESERIALIZATION_ERROR,
                message=f"Failed to decode {type_name}",
                exc_info=error,
                metadata={'type_name': type_name}
            )
            raise error

        reader = self._reader(data)
        try:
            if isinstance(cls, type) and issubclass(cls, Enum):
                value = reader.read_enum(cls)
            elif hasattr(cls, 'read_cdr'):
                value = cls.read_cdr(reader)
            else:
                raise CdrError(
                    f"Cannot decode {cls.__name__}: not a generated type"
                )

            if reader.remaining and not self.config.allow_trailing_bytes:
                raise CdrError(
                    f"{reader.remaining} trailing bytes after {type_name}"
                )
        except CdrError as e:
            self.logger.error(
                event=LogEvent.DESERIALIZATION_ERROR,
                message=f"Failed to decode {type_name}",
                exc_info=e,
                metadata={'type_name': type_name, 'size': len(data)}
            )
            raise

        self.logger.debug(
            event=LogEvent.CDR_DECODED,
            message=f"Decoded {type_name}",
            metadata={
                'type_name': type_name,
                'size': len(data),
                'consumed': reader.offset,
            }
        )
        return value


_default_codec: Optional[CdrCodec] = None


def _get_default_codec() -> CdrCodec:
    global _default_codec
    if _default_codec is None:
        _default_codec = CdrCodec()
    return _default_codec


def encode(value: Any) -> bytes:
    """Encode with the default (little-endian, UTF-8) codec."""
    return _get_default_codec().encode(value)


def decode(target: Union[Type[Any], str], data: bytes) -> Any:
    """Decode with the default (little-endian, UTF-8) codec."""
    return _get_default_codec().decode(target, data)
