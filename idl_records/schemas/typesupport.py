"""
Type Support
============

Bounded Context: Runtime Type Descriptions

Describes each generated record and enumeration at runtime: its IDL scoped
name, member layout and wire kinds. Also defines the structural protocol
every record satisfies so it can pass through the CDR codec.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional, Protocol, Tuple, runtime_checkable

from ..cdr.stream import CdrReader, CdrWriter


class TypeKind(str, Enum):
    """Wire kind of a type or member."""
    BOOLEAN = "BOOLEAN"
    OCTET = "OCTET"
    INT16 = "INT16"
    INT32 = "INT32"
    INT64 = "INT64"
    FLOAT32 = "FLOAT32"
    FLOAT64 = "FLOAT64"
    STRING = "STRING"
    SEQUENCE = "SEQUENCE"
    STRUCT = "STRUCT"
    ENUM = "ENUM"


@dataclass(frozen=True)
class MemberDescriptor:
    """
    One struct member.

    Attributes:
        name: Field name as declared in IDL
        kind: Wire kind of the field
        type_name: Scoped name for STRUCT/ENUM members, None otherwise
        element_kind: Element kind for SEQUENCE members, None otherwise
    """
    name: str
    kind: TypeKind
    type_name: Optional[str] = None
    element_kind: Optional[TypeKind] = None

    def __post_init__(self):
        if self.kind == TypeKind.SEQUENCE and self.element_kind is None:
            raise ValueError(f"Sequence member '{self.name}' needs element_kind")

    def to_dict(self) -> Dict[str, Any]:
        result: Dict[str, Any] = {'name': self.name, 'kind': self.kind.value}
        if self.type_name is not None:
            result['type_name'] = self.type_name
        if self.element_kind is not None:
            result['element_kind'] = self.element_kind.value
        return result


@dataclass(frozen=True)
class TypeDescriptor:
    """
    Description of a generated type.

    Attributes:
        name: Unqualified type name (e.g. "Circle")
        scoped_name: IDL scoped name (e.g. "Shapes::Circle")
        kind: STRUCT or ENUM
        members: Struct members in declaration order (empty for enums)
        enumerators: Enumerator names in code order (empty for structs)

    Example:
        >>> Point.describe_type().member_names
        ('x', 'y')
    """
    name: str
    scoped_name: str
    kind: TypeKind
    members: Tuple[MemberDescriptor, ...] = ()
    enumerators: Tuple[str, ...] = ()

    def __post_init__(self):
        if self.kind not in (TypeKind.STRUCT, TypeKind.ENUM):
            raise ValueError(
                f"TypeDescriptor kind must be STRUCT or ENUM, got {self.kind}"
            )

    @property
    def module(self) -> str:
        """IDL module part of the scoped name."""
        return self.scoped_name.rpartition('::')[0]

    @property
    def member_names(self) -> Tuple[str, ...]:
        return tuple(member.name for member in self.members)

    def get_member(self, name: str) -> Optional[MemberDescriptor]:
        for member in self.members:
            if member.name == name:
                return member
        return None

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to JSON-compatible dict."""
        return {
            'name': self.name,
            'scoped_name': self.scoped_name,
            'kind': self.kind.value,
            'members': [member.to_dict() for member in self.members],
            'enumerators': list(self.enumerators),
        }


def describe_enum(enum_cls, scoped_name: str) -> TypeDescriptor:
    """Build the descriptor for an enumeration, enumerators in code order."""
    ordered = sorted(enum_cls, key=lambda member: member.value)
    return TypeDescriptor(
        name=enum_cls.__name__,
        scoped_name=scoped_name,
        kind=TypeKind.ENUM,
        enumerators=tuple(member.name for member in ordered),
    )


@runtime_checkable
class CdrSerializable(Protocol):
    """
    Capability of passing through the CDR codec.

    Satisfied structurally by every generated record; there is no shared
    base class.
    """

    TYPE_NAME: str

    def write_cdr(self, writer: CdrWriter) -> None:
        ...

    @classmethod
    def read_cdr(cls, reader: CdrReader) -> Any:
        ...

    @classmethod
    def describe_type(cls) -> TypeDescriptor:
        ...
