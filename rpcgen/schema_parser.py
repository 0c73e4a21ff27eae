"""Extract the service model from a definition document and resolve types.

Document shape (one or more services per file):

    {
      "SpaceCenter": {
        "classes": {"Vessel": {...}},
        "enumerations": {"GameMode": {"values": [{"name": "Sandbox"}, ...]}},
        "procedures": {
          "GetActiveVessel": {
            "parameters": [{"name": "id", "type": {"code": "SINT32"}}],
            "return_type": {"code": "CLASS", "service": "SpaceCenter", "name": "Vessel"}
          }
        }
      }
    }

Handles:
- Primitive codes (STRING, SINT32, BOOL, FLOAT, DOUBLE)
- TUPLE and LIST, recursively
- CLASS references into any service, including ones defined in other files
- Unknown codes, which resolve to an empty type instead of failing

Any other deviation from this shape raises SchemaValidationError.
"""

from __future__ import annotations

from typing import Any

from .errors import SchemaValidationError
from .model import (
    PRIMITIVE_CODES,
    Class,
    EnumDescriptor,
    List,
    ParameterDescriptor,
    Primitive,
    ProcedureDescriptor,
    ServiceDescriptor,
    Tuple,
    TypeRef,
    Unknown,
)
from .naming import to_snake_case

SERVICES_MODULE = "crate::services"

_PRIMITIVE_TYPES: dict[str, str] = {
    "STRING": "String",
    "SINT32": "i32",
    "BOOL": "bool",
    "FLOAT": "f32",
    "DOUBLE": "f64",
}


def _require(node: dict[str, Any], key: str, kind: type, where: str) -> Any:
    """Fetch a required key and check its JSON type."""
    if key not in node:
        raise SchemaValidationError("missing required key", field=f"{where}.{key}")
    value = node[key]
    if not isinstance(value, kind):
        raise SchemaValidationError(
            f"expected {kind.__name__}, got {type(value).__name__}",
            field=f"{where}.{key}",
        )
    return value


def _as_object(value: Any, where: str) -> dict[str, Any]:
    if not isinstance(value, dict):
        raise SchemaValidationError(
            f"expected dict, got {type(value).__name__}", field=where,
        )
    return value


def parse_type(node: Any, where: str = "type") -> TypeRef:
    """Parse a type descriptor into a TypeRef."""
    node = _as_object(node, where)
    code = _require(node, "code", str, where)

    if code in PRIMITIVE_CODES:
        return Primitive(code)
    if code == "TUPLE":
        members = _require(node, "types", list, where)
        return Tuple(tuple(
            parse_type(t, f"{where}.types[{i}]") for i, t in enumerate(members)
        ))
    if code == "LIST":
        members = _require(node, "types", list, where)
        if not members:
            raise SchemaValidationError("LIST needs an element type", field=f"{where}.types")
        # Only the first entry describes the element type
        return List(parse_type(members[0], f"{where}.types[0]"))
    if code == "CLASS":
        return Class(
            service=_require(node, "service", str, where),
            name=_require(node, "name", str, where),
        )
    return Unknown(code)


def parse_parameters(node: dict[str, Any], where: str) -> tuple[ParameterDescriptor, ...]:
    """Parse a procedure's parameter list, keeping its order."""
    params = []
    for i, raw in enumerate(_require(node, "parameters", list, where)):
        param_where = f"{where}.parameters[{i}]"
        param = _as_object(raw, param_where)
        params.append(ParameterDescriptor(
            name=_require(param, "name", str, param_where),
            type=parse_type(_require(param, "type", dict, param_where), f"{param_where}.type"),
        ))
    return tuple(params)


def parse_procedure(name: str, node: Any, where: str) -> ProcedureDescriptor:
    node = _as_object(node, where)
    return_type = None
    if "return_type" in node:
        return_type = parse_type(node["return_type"], f"{where}.return_type")
    return ProcedureDescriptor(
        name=name,
        parameters=parse_parameters(node, where),
        return_type=return_type,
    )


def parse_enumeration(name: str, node: Any, where: str) -> EnumDescriptor:
    node = _as_object(node, where)
    values = []
    for i, raw in enumerate(_require(node, "values", list, where)):
        value_where = f"{where}.values[{i}]"
        values.append(_require(_as_object(raw, value_where), "name", str, value_where))
    return EnumDescriptor(name=name, values=tuple(values))


def parse_service(name: str, body: Any) -> ServiceDescriptor:
    """Build a ServiceDescriptor from one top-level entry of a document.

    Object-keyed collections come out sorted by name; arrays keep their order.
    """
    body = _as_object(body, name)
    classes = _require(body, "classes", dict, name)
    enums = _require(body, "enumerations", dict, name)
    procedures = _require(body, "procedures", dict, name)

    return ServiceDescriptor(
        name=name,
        classes=tuple(sorted(classes)),
        enumerations=tuple(
            parse_enumeration(enum_name, enums[enum_name], f"{name}.enumerations.{enum_name}")
            for enum_name in sorted(enums)
        ),
        procedures=tuple(
            parse_procedure(proc_name, procedures[proc_name], f"{name}.procedures.{proc_name}")
            for proc_name in sorted(procedures)
        ),
    )


def parse_document(document: Any) -> list[ServiceDescriptor]:
    """Parse every service in a definition document, sorted by service name."""
    document = _as_object(document, "<document>")
    return [parse_service(name, document[name]) for name in sorted(document)]


def resolve_type(type_ref: TypeRef) -> str:
    """Resolve a TypeRef to a Rust type expression."""
    if isinstance(type_ref, Primitive):
        return _PRIMITIVE_TYPES[type_ref.code]
    if isinstance(type_ref, Tuple):
        members = [resolve_type(t) for t in type_ref.types]
        if len(members) == 1:
            # (T) is just T in Rust
            return f"({members[0]},)"
        return "({})".format(", ".join(members))
    if isinstance(type_ref, List):
        return f"Vec<{resolve_type(type_ref.element)}>"
    if isinstance(type_ref, Class):
        return f"{SERVICES_MODULE}::{to_snake_case(type_ref.service)}::{type_ref.name}"
    return ""
