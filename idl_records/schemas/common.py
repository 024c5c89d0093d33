"""
Common Schema Types
==================

Bounded Context: IDL modules CommonEnums and CommonStructs

Types:
- StatusCode: Closed status enumeration (OK, ERROR, WARNING)
- InnerStruct: Immutable (id, name) pair
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, ClassVar, Dict

from ..cdr.stream import CdrReader, CdrWriter
from .typesupport import MemberDescriptor, TypeDescriptor, TypeKind, describe_enum


class StatusCode(int, Enum):
    """Status enumeration with fixed wire codes."""
    OK = 0
    ERROR = 1
    WARNING = 2

    TYPE_NAME: ClassVar[str]

    @classmethod
    def describe_type(cls) -> TypeDescriptor:
        return describe_enum(cls, cls.TYPE_NAME)


StatusCode.TYPE_NAME = "CommonEnums::StatusCode"


@dataclass(frozen=True)
class InnerStruct:
    """
    Immutable (id, name) pair.

    No constraints: negative ids and empty names are accepted.

    Example:
        >>> str(InnerStruct(id=7, name="alpha"))
        'InnerStruct[id=7, name=alpha]'
    """
    id: int
    name: str

    TYPE_NAME: ClassVar[str] = "CommonStructs::InnerStruct"

    def __str__(self) -> str:
        return f"InnerStruct[id={self.id}, name={self.name}]"

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to JSON-compatible dict."""
        return {'id': self.id, 'name': self.name}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'InnerStruct':
        """Deserialize from dict.

        Raises:
            ValueError: If required keys missing or invalid values
        """
        try:
            return cls(id=int(data['id']), name=str(data['name']))
        except KeyError as e:
            raise ValueError(f"Missing required InnerStruct field: {e}")
        except (TypeError, ValueError) as e:
            raise ValueError(f"Invalid InnerStruct data: {e}")

    def write_cdr(self, writer: CdrWriter) -> None:
        writer.write_int32(self.id)
        writer.write_string(self.name)

    @classmethod
    def read_cdr(cls, reader: CdrReader) -> 'InnerStruct':
        return cls(id=reader.read_int32(), name=reader.read_string())

    @classmethod
    def describe_type(cls) -> TypeDescriptor:
        return TypeDescriptor(
            name=cls.__name__,
            scoped_name=cls.TYPE_NAME,
            kind=TypeKind.STRUCT,
            members=(
                MemberDescriptor('id', TypeKind.INT32),
                MemberDescriptor('name', TypeKind.STRING),
            ),
        )
