"""
genORM Schema Model

In-memory representation of a parsed config document. The config loader
builds Member/ObjectType/Config; the validator turns each ObjectType into a
ValidatedObjectType whose member kinds are resolved to the Kind enum.
Everything here is immutable for the duration of a generation run.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Tuple


class Kind(Enum):
    """Closed set of scalar member kinds (values are the document strings)."""
    INT32 = "INT32"
    INT64 = "INT64"
    BYTEARRAY = "BYTEARRAY"


@dataclass(frozen=True)
class Member:
    """A single member of an object type, as written in the document."""
    name: str
    kind: str                           # Raw kind string, e.g. "INT32"
    description: Optional[str] = None
    allow_null: bool = False
    indexed: bool = False


@dataclass(frozen=True)
class ObjectType:
    """An object type: one generated class and one table."""
    name: str
    members: Tuple[Member, ...] = field(default_factory=tuple)
    description: Optional[str] = None


@dataclass(frozen=True)
class TargetOptions:
    """C++ target options (the "cxx-options" block)."""
    file_prefix: str
    namespace: str
    output_root_token: Optional[str] = None
    output_dir: Optional[str] = None


@dataclass(frozen=True)
class Config:
    """Complete config document."""
    version: int
    target_options: Optional[TargetOptions] = None
    object_types: Tuple[ObjectType, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class ValidatedMember:
    """A member that passed validation; kind is resolved."""
    name: str
    kind: Kind
    description: Optional[str] = None
    allow_null: bool = False
    indexed: bool = False


@dataclass(frozen=True)
class ValidatedObjectType:
    """An object type whose members all passed validation."""
    name: str
    members: Tuple[ValidatedMember, ...]
    description: Optional[str] = None
    
    @property
    def indexed_members(self) -> Tuple[ValidatedMember, ...]:
        return tuple(m for m in self.members if m.indexed)
