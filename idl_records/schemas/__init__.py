"""
idl_records Schemas
===================

Bounded Context: Data Structures

Immutable records and enumerations generated from the Shapes, CommonStructs
and CommonEnums IDL modules.

Design:
- Frozen dataclasses (immutability, structural equality)
- str() in record form, e.g. Point[x=0, y=0]
- to_dict()/from_dict() for JSON
- write_cdr()/read_cdr() for the binary codec
- describe_type() for runtime type descriptions

Public API
----------
Common Types:
    StatusCode: Enum (OK, ERROR, WARNING)
    InnerStruct: (id, name) record

Shape Types:
    ShapeType: Enum (CIRCLE, RECTANGLE, TRIANGLE)
    Point, Rectangle, Circle

Type Support:
    TypeKind, MemberDescriptor, TypeDescriptor, CdrSerializable
    TYPE_REGISTRY, lookup_type

Example:
    >>> from idl_records.schemas import Rectangle, Point
    >>> str(Rectangle(id=1, top_left=Point(0, 0), bottom_right=Point(10, 10), label="box"))
    'Rectangle[id=1, top_left=Point[x=0, y=0], bottom_right=Point[x=10, y=10], label=box]'
"""

from typing import Dict

from .common import StatusCode, InnerStruct
from .shapes import ShapeType, Point, Rectangle, Circle
from .typesupport import (
    TypeKind,
    MemberDescriptor,
    TypeDescriptor,
    CdrSerializable,
)

TYPE_REGISTRY: Dict[str, type] = {
    cls.TYPE_NAME: cls
    for cls in (StatusCode, InnerStruct, ShapeType, Point, Rectangle, Circle)
}


def lookup_type(scoped_name: str) -> type:
    """Resolve an IDL scoped name (e.g. "Shapes::Point") to its class.

    Raises:
        KeyError: If no generated type has that name
    """
    try:
        return TYPE_REGISTRY[scoped_name]
    except KeyError:
        raise KeyError(
            f"Unknown type: {scoped_name}. "
            f"Known types: {sorted(TYPE_REGISTRY)}"
        ) from None


__all__ = [
    # Common types
    'StatusCode',
    'InnerStruct',
    # Shape types
    'ShapeType',
    'Point',
    'Rectangle',
    'Circle',
    # Type support
    'TypeKind',
    'MemberDescriptor',
    'TypeDescriptor',
    'CdrSerializable',
    'TYPE_REGISTRY',
    'lookup_type',
]
