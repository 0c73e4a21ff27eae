"""In-memory model of a parsed service definition.

Everything here is built once per definition document and never mutated.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

PRIMITIVE_CODES: frozenset[str] = frozenset({"STRING", "SINT32", "BOOL", "FLOAT", "DOUBLE"})


@dataclass(frozen=True, slots=True)
class Primitive:
    code: str


@dataclass(frozen=True, slots=True)
class Tuple:
    types: tuple[TypeRef, ...]


@dataclass(frozen=True, slots=True)
class List:
    element: TypeRef


@dataclass(frozen=True, slots=True)
class Class:
    service: str
    name: str


@dataclass(frozen=True, slots=True)
class Unknown:
    """A type code outside the known set; resolves to an empty type."""
    code: str


TypeRef = Union[Primitive, Tuple, List, Class, Unknown]


@dataclass(frozen=True, slots=True)
class ParameterDescriptor:
    name: str
    type: TypeRef


@dataclass(frozen=True, slots=True)
class ProcedureDescriptor:
    """A remote procedure. Parameter order is the positional call order."""
    name: str
    parameters: tuple[ParameterDescriptor, ...]
    return_type: TypeRef | None = None


@dataclass(frozen=True, slots=True)
class EnumDescriptor:
    name: str
    values: tuple[str, ...]


@dataclass(frozen=True, slots=True)
class ServiceDescriptor:
    """A service as described by one top-level key of a definition document.

    ``name`` is the raw schema key. It is sent on the wire unchanged and is
    only normalized where it becomes a generated identifier.
    """
    name: str
    classes: tuple[str, ...] = ()
    enumerations: tuple[EnumDescriptor, ...] = ()
    procedures: tuple[ProcedureDescriptor, ...] = ()
