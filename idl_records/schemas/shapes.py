"""
Shape Schema Types
==================

Bounded Context: IDL module Shapes

Design:
- Frozen dataclasses (immutability, structural equality)
- str() renders the record form, e.g. Point[x=0, y=0]
- No geometric validation: a Rectangle's corners may be in any order and a
  Circle's radius may be zero or negative

Types:
- ShapeType: Closed shape enumeration (CIRCLE, RECTANGLE, TRIANGLE)
- Point: Integer (x, y) coordinate
- Rectangle: Corner-defined rectangle with label
- Circle: Center/radius circle with color and opaque float samples
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, ClassVar, Dict, Sequence, Tuple

from ..cdr.stream import CdrReader, CdrWriter
from .typesupport import MemberDescriptor, TypeDescriptor, TypeKind, describe_enum


class ShapeType(int, Enum):
    """Shape enumeration with fixed wire codes."""
    CIRCLE = 0
    RECTANGLE = 1
    TRIANGLE = 2

    TYPE_NAME: ClassVar[str]

    @classmethod
    def describe_type(cls) -> TypeDescriptor:
        return describe_enum(cls, cls.TYPE_NAME)


ShapeType.TYPE_NAME = "Shapes::ShapeType"


@dataclass(frozen=True)
class Point:
    """
    Immutable integer coordinate.

    Example:
        >>> str(Point(x=3, y=4))
        'Point[x=3, y=4]'
    """
    x: int
    y: int

    TYPE_NAME: ClassVar[str] = "Shapes::Point"

    def __str__(self) -> str:
        return f"Point[x={self.x}, y={self.y}]"

    def to_dict(self) -> Dict[str, int]:
        """Serialize to JSON-compatible dict."""
        return {'x': self.x, 'y': self.y}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Point':
        """Deserialize from dict.

        Raises:
            ValueError: If required keys missing or invalid values
        """
        try:
            return cls(x=int(data['x']), y=int(data['y']))
        except KeyError as e:
            raise ValueError(f"Missing required Point field: {e}")
        except (TypeError, ValueError) as e:
            raise ValueError(f"Invalid Point data: {e}")

    def write_cdr(self, writer: CdrWriter) -> None:
        writer.write_int32(self.x)
        writer.write_int32(self.y)

    @classmethod
    def read_cdr(cls, reader: CdrReader) -> 'Point':
        return cls(x=reader.read_int32(), y=reader.read_int32())

    @classmethod
    def describe_type(cls) -> TypeDescriptor:
        return TypeDescriptor(
            name=cls.__name__,
            scoped_name=cls.TYPE_NAME,
            kind=TypeKind.STRUCT,
            members=(
                MemberDescriptor('x', TypeKind.INT32),
                MemberDescriptor('y', TypeKind.INT32),
            ),
        )


@dataclass(frozen=True)
class Rectangle:
    """
    Immutable labelled rectangle.

    Attributes:
        id: Record identifier
        top_left: First corner
        bottom_right: Opposite corner
        label: Free-form label

    Example:
        >>> rect = Rectangle(1, Point(0, 0), Point(10, 10), "box")
        >>> str(rect)
        'Rectangle[id=1, top_left=Point[x=0, y=0], bottom_right=Point[x=10, y=10], label=box]'
    """
    id: int
    top_left: Point
    bottom_right: Point
    label: str

    TYPE_NAME: ClassVar[str] = "Shapes::Rectangle"

    def __str__(self) -> str:
        return (
            f"Rectangle[id={self.id}, top_left={self.top_left}, "
            f"bottom_right={self.bottom_right}, label={self.label}]"
        )

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to JSON-compatible dict."""
        return {
            'id': self.id,
            'top_left': self.top_left.to_dict(),
            'bottom_right': self.bottom_right.to_dict(),
            'label': self.label,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Rectangle':
        """Deserialize from dict.

        Args:
            data: Dictionary with keys: id, top_left, bottom_right, label

        Returns:
            Rectangle instance

        Raises:
            ValueError: If required keys missing or invalid values
        """
        try:
            return cls(
                id=int(data['id']),
                top_left=Point.from_dict(data['top_left']),
                bottom_right=Point.from_dict(data['bottom_right']),
                label=str(data['label'])
            )
        except KeyError as e:
            raise ValueError(f"Missing required Rectangle field: {e}")
        except (TypeError, ValueError) as e:
            raise ValueError(f"Invalid Rectangle data: {e}")

    def write_cdr(self, writer: CdrWriter) -> None:
        writer.write_int32(self.id)
        self.top_left.write_cdr(writer)
        self.bottom_right.write_cdr(writer)
        writer.write_string(self.label)

    @classmethod
    def read_cdr(cls, reader: CdrReader) -> 'Rectangle':
        return cls(
            id=reader.read_int32(),
            top_left=Point.read_cdr(reader),
            bottom_right=Point.read_cdr(reader),
            label=reader.read_string()
        )

    @classmethod
    def describe_type(cls) -> TypeDescriptor:
        return TypeDescriptor(
            name=cls.__name__,
            scoped_name=cls.TYPE_NAME,
            kind=TypeKind.STRUCT,
            members=(
                MemberDescriptor('id', TypeKind.INT32),
                MemberDescriptor('top_left', TypeKind.STRUCT, Point.TYPE_NAME),
                MemberDescriptor('bottom_right', TypeKind.STRUCT, Point.TYPE_NAME),
                MemberDescriptor('label', TypeKind.STRING),
            ),
        )


@dataclass(frozen=True)
class Circle:
    """
    Immutable circle with color and auxiliary points.

    ``points`` is an opaque ordered sequence of floats. Whatever sequence is
    passed in is copied into a tuple, so the circle owns it exclusively.
    ``radius`` and every element of ``points`` are stored as float.

    Attributes:
        id: Record identifier
        center: Center point
        radius: Radius (not checked for sign)
        color: Free-form color name
        points: Float samples in original order

    Example:
        >>> circle = Circle(2, Point(5, 5), 3, "red", [1, 2.5])
        >>> str(circle)
        'Circle[id=2, center=Point[x=5, y=5], radius=3.0, color=red, points=[1.0, 2.5]]'
    """
    id: int
    center: Point
    radius: float
    color: str
    points: Tuple[float, ...] = ()

    TYPE_NAME: ClassVar[str] = "Shapes::Circle"

    def __post_init__(self):
        """Normalise numeric fields (using object.__setattr__ for frozen dataclass)."""
        object.__setattr__(self, 'radius', float(self.radius))
        object.__setattr__(self, 'points', tuple(float(p) for p in self.points))

    def __str__(self) -> str:
        return (
            f"Circle[id={self.id}, center={self.center}, radius={self.radius}, "
            f"color={self.color}, points={list(self.points)}]"
        )

    @property
    def point_count(self) -> int:
        return len(self.points)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to JSON-compatible dict."""
        return {
            'id': self.id,
            'center': self.center.to_dict(),
            'radius': self.radius,
            'color': self.color,
            'points': list(self.points),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Circle':
        """Deserialize from dict.

        Args:
            data: Dictionary with keys: id, center, radius, color and
                optionally points (defaults to empty)

        Returns:
            Circle instance

        Raises:
            ValueError: If required keys missing or invalid values
        """
        try:
            points: Sequence[Any] = data.get('points', [])
            return cls(
                id=int(data['id']),
                center=Point.from_dict(data['center']),
                radius=float(data['radius']),
                color=str(data['color']),
                points=tuple(points)
            )
        except KeyError as e:
            raise ValueError(f"Missing required Circle field: {e}")
        except (TypeError, ValueError) as e:
            raise ValueError(f"Invalid Circle data: {e}")

    def write_cdr(self, writer: CdrWriter) -> None:
        writer.write_int32(self.id)
        self.center.write_cdr(writer)
        writer.write_float64(self.radius)
        writer.write_string(self.color)
        writer.write_sequence(self.points, writer.write_float64)

    @classmethod
    def read_cdr(cls, reader: CdrReader) -> 'Circle':
        return cls(
            id=reader.read_int32(),
            center=Point.read_cdr(reader),
            radius=reader.read_float64(),
            color=reader.read_string(),
            points=tuple(reader.read_sequence(reader.read_float64))
        )

    @classmethod
    def describe_type(cls) -> TypeDescriptor:
        return TypeDescriptor(
            name=cls.__name__,
            scoped_name=cls.TYPE_NAME,
            kind=TypeKind.STRUCT,
            members=(
                MemberDescriptor('id', TypeKind.INT32),
                MemberDescriptor('center', TypeKind.STRUCT, Point.TYPE_NAME),
                MemberDescriptor('radius', TypeKind.FLOAT64),
                MemberDescriptor('color', TypeKind.STRING),
                MemberDescriptor(
                    'points', TypeKind.SEQUENCE, element_kind=TypeKind.FLOAT64
                ),
            ),
        )
