"""
idl_records
===========

Bounded Context: Generated IDL Records

Immutable Python records for the Shapes, CommonStructs and CommonEnums IDL
modules, with a binary (CDR) codec and JSON-compatible dict conversion.

Architecture:
- schemas/: Immutable records, enumerations and type descriptors
- cdr/: Wire primitives (CdrWriter, CdrReader, errors)
- codec.py: CdrCodec tying records, config and logging together
- config.py: YAML-backed codec and logging settings
- logging/: Structured JSON logging

Public API
----------
Schemas:
    StatusCode, InnerStruct
    ShapeType, Point, Rectangle, Circle
    TypeKind, MemberDescriptor, TypeDescriptor, lookup_type

Codec:
    CdrCodec, encode, decode
    CdrError, CdrRangeError, CdrTruncatedError

Config:
    RecordsConfig, CodecConfig, LoggingConfig

Logging:
    LogEvent, StructuredLogger, create_logger

Example:
    >>> from idl_records import Circle, Point, encode, decode
    >>> circle = Circle(id=2, center=Point(5, 5), radius=3.0, color="red",
    ...                 points=[1.0, 2.5])
    >>> decode(Circle, encode(circle)) == circle
    True
"""

# Version
__version__ = "1.0.0"

# Schemas
from .schemas import (
    StatusCode,
    InnerStruct,
    ShapeType,
    Point,
    Rectangle,
    Circle,
    TypeKind,
    MemberDescriptor,
    TypeDescriptor,
    CdrSerializable,
    TYPE_REGISTRY,
    lookup_type,
)

# Codec
from .cdr import CdrError, CdrRangeError, CdrTruncatedError
from .codec import CdrCodec, encode, decode

# Config
from .config import RecordsConfig, CodecConfig, LoggingConfig

# Logging
from .logging import (
    LogEvent,
    StructuredLogger,
    create_logger,
)

__all__ = [
    # Version
    '__version__',
    # Schemas - Common
    'StatusCode',
    'InnerStruct',
    # Schemas - Shapes
    'ShapeType',
    'Point',
    'Rectangle',
    'Circle',
    # Schemas - Type support
    'TypeKind',
    'MemberDescriptor',
    'TypeDescriptor',
    'CdrSerializable',
    'TYPE_REGISTRY',
    'lookup_type',
    # Codec
    'CdrCodec',
    'encode',
    'decode',
    'CdrError',
    'CdrRangeError',
    'CdrTruncatedError',
    # Config
    'RecordsConfig',
    'CodecConfig',
    'LoggingConfig',
    # Logging
    'LogEvent',
    'StructuredLogger',
    'create_logger',
]
