"""
CDR Byte Streams
================

Bounded Context: Wire Primitives

Primitive readers and writers for the record wire format.

Wire format:
- int32 (IDL long) and enum codes: 4 bytes, two's complement
- float64 (IDL double): 8 bytes, IEEE 754
- string: int32 byte length, then the encoded bytes
- sequence: int32 element count, then each element
- nested struct: its fields inline, no framing

Byte order is little-endian unless configured otherwise.
"""

import struct
from enum import Enum
from typing import Callable, List, Sequence, Type, TypeVar

T = TypeVar('T')
E = TypeVar('E', bound=Enum)

INT32_MIN = -(2 ** 31)
INT32_MAX = 2 ** 31 - 1

_BYTE_ORDER_PREFIX = {
    'little': '<',
    'big': '>',
}


class CdrError(ValueError):
    """Raised when a value cannot be encoded or decoded."""
    pass


class CdrRangeError(CdrError):
    """Raised when a value does not fit its wire type."""
    pass


class CdrTruncatedError(CdrError):
    """Raised when the input ends before a value is complete."""
    pass


def _prefix(byte_order: str) -> str:
    try:
        return _BYTE_ORDER_PREFIX[byte_order]
    except KeyError:
        raise ValueError(
            f"Invalid byte_order: {byte_order}. "
            f"Must be one of {set(_BYTE_ORDER_PREFIX)}"
        )


class CdrWriter:
    """
    Append-only CDR output buffer.

    Example:
        >>> writer = CdrWriter()
        >>> writer.write_int32(1)
        >>> writer.write_string("box")
        >>> writer.getvalue()
        b'\\x01\\x00\\x00\\x00\\x03\\x00\\x00\\x00box'
    """

    def __init__(self, byte_order: str = 'little', encoding: str = 'utf-8'):
        self.byte_order = byte_order
        self.encoding = encoding
        self._int32 = struct.Struct(_prefix(byte_order) + 'i')
        self._float64 = struct.Struct(_prefix(byte_order) + 'd')
        self._buffer = bytearray()

    def __len__(self) -> int:
        return len(self._buffer)

    def getvalue(self) -> bytes:
        """Return the bytes written so far."""
        return bytes(self._buffer)

    def write_int32(self, value: int) -> None:
        if isinstance(value, bool) or not isinstance(value, int):
            raise CdrRangeError(
                f"int32 value must be an int, got {type(value).__name__}"
            )
        if not INT32_MIN <= value <= INT32_MAX:
            raise CdrRangeError(
                f"int32 value out of range [{INT32_MIN}, {INT32_MAX}]: {value}"
            )
        self._buffer += self._int32.pack(value)

    def write_float64(self, value: float) -> None:
        try:
            self._buffer += self._float64.pack(value)
        except struct.error as e:
            raise CdrRangeError(f"Invalid float64 value {value!r}: {e}") from e

    def write_string(self, value: str) -> None:
        if not isinstance(value, str):
            raise CdrError(
                f"string value must be a str, got {type(value).__name__}"
            )
        try:
            encoded = value.encode(self.encoding)
        except UnicodeEncodeError as e:
            raise CdrError(f"Cannot encode string as {self.encoding}: {e}") from e
        self.write_int32(len(encoded))
        self._buffer += encoded

    def write_enum(self, value: Enum) -> None:
        self.write_int32(int(value.value))

    def write_sequence(
        self,
        values: Sequence[T],
        write_element: Callable[[T], None]
    ) -> None:
        """
        Write a length-prefixed sequence.

        Args:
            values: Elements in wire order
            write_element: Writer method for one element (e.g. write_float64)
        """
        self.write_int32(len(values))
        for value in values:
            write_element(value)


class CdrReader:
    """
    Sequential CDR input cursor.

    Attributes:
        offset: Number of bytes consumed so far

    Example:
        >>> reader = CdrReader(b'\\x01\\x00\\x00\\x00')
        >>> reader.read_int32()
        1
        >>> reader.remaining
        0
    """

    def __init__(
        self,
        data: bytes,
        byte_order: str = 'little',
        encoding: str = 'utf-8',
        max_string_length: int = 1_048_576,
        max_sequence_length: int = 1_048_576
    ):
        self.byte_order = byte_order
        self.encoding = encoding
        self.max_string_length = max_string_length
        self.max_sequence_length = max_sequence_length
        self._int32 = struct.Struct(_prefix(byte_order) + 'i')
        self._float64 = struct.Struct(_prefix(byte_order) + 'd')
        self._data = memoryview(bytes(data))
        self.offset = 0

    @property
    def remaining(self) -> int:
        """Number of unread bytes."""
        return len(self._data) - self.offset

    def _take(self, size: int, what: str) -> memoryview:
        if size > self.remaining:
            raise CdrTruncatedError(
                f"Truncated input reading {what}: need {size} bytes "
                f"at offset {self.offset}, have {self.remaining}"
            )
        chunk = self._data[self.offset:self.offset + size]
        self.offset += size
        return chunk

    def read_int32(self) -> int:
        return self._int32.unpack(self._take(4, 'int32'))[0]

    def read_float64(self) -> float:
        return self._float64.unpack(self._take(8, 'float64'))[0]

    def _read_length(self, what: str, limit: int) -> int:
        length = self.read_int32()
        if length < 0:
            raise CdrError(f"Negative {what} length: {length}")
        if length > limit:
            raise CdrRangeError(
                f"{what} length {length} exceeds limit {limit}"
            )
        return length

    def read_string(self) -> str:
        length = self._read_length('string', self.max_string_length)
        raw = self._take(length, 'string')
        try:
            return bytes(raw).decode(self.encoding)
        except UnicodeDecodeError as e:
            raise CdrError(f"Cannot decode string as {self.encoding}: {e}") from e

    def read_enum(self, enum_cls: Type[E]) -> E:
        code = self.read_int32()
        try:
            return enum_cls(code)
        except ValueError:
            raise CdrError(f"Unknown {enum_cls.__name__} code: {code}")

    def read_sequence(self, read_element: Callable[[], T]) -> List[T]:
        """
        Read a length-prefixed sequence.

        Args:
            read_element: Reader method for one element (e.g. read_float64)

        Returns:
            Elements in wire order
        """
        count = self._read_length('sequence', self.max_sequence_length)
        return [read_element() for _ in range(count)]
