"""Build the Jinja2 template context from parsed services.

Each service becomes one Rust module: a service struct holding the shared
client, the class/enum macro directives, a constructor and one method per
bindable procedure.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from .model import EnumDescriptor, ProcedureDescriptor, ServiceDescriptor
from .naming import escape_keyword, is_pascal_case, to_pascal_case, to_snake_case
from .schema_parser import resolve_type

logger = logging.getLogger(__name__)

SCHEMA_MODULE = "crate::schema"
CLIENT_TYPE = "crate::client::Client"


@dataclass(frozen=True, slots=True)
class Directive:
    """A declarative macro invocation from the schema module."""
    macro: str
    args: tuple[str, ...]

    def render(self) -> str:
        return f"{SCHEMA_MODULE}::{self.macro}!({', '.join(self.args)});"


def object_directive(name: str) -> Directive:
    """Directive that defines a remote class and its conversions."""
    return Directive("rpc_object", (name,))


def enum_directive(enum: EnumDescriptor) -> Directive:
    """Directive that defines an enumeration; values keep schema order."""
    return Directive("rpc_enum", (enum.name, f"[{', '.join(enum.values)}]"))


def build_method(service: ServiceDescriptor, procedure: ProcedureDescriptor) -> dict[str, Any]:
    """Build the template context for one procedure binding.

    Arguments are tagged with their position; the transport dispatches
    by position, so declaration order is kept as is.
    """
    params = []
    arguments = []
    for position, param in enumerate(procedure.parameters):
        name = escape_keyword(to_snake_case(param.name))
        params.append({"name": name, "type": resolve_type(param.type)})
        arguments.append(f"{name}.to_argument({position})")

    return_type = None
    if procedure.return_type is not None:
        return_type = resolve_type(procedure.return_type) or None

    return {
        "name": escape_keyword(to_snake_case(procedure.name)),
        "service": service.name,
        "procedure": procedure.name,
        "params": params,
        "arguments": arguments,
        "return_type": return_type,
    }


def _deduplicate_method_names(methods: list[dict[str, Any]]) -> None:
    """Ensure method names are unique within a service by numbering repeats.

    A numbered name is itself checked against names already taken, so
    get_ui, get_ui, get_ui_2 becomes get_ui, get_ui_2, get_ui_2_2.
    """
    used: set[str] = set()
    for method in methods:
        name = method["name"]
        candidate = name
        counter = 1
        while candidate in used:
            counter += 1
            candidate = f"{name}_{counter}"
        method["name"] = candidate
        used.add(candidate)


def build_service_context(service: ServiceDescriptor) -> dict[str, Any]:
    """Build the template context for one service module."""
    directives = [object_directive(name) for name in service.classes]
    directives.extend(enum_directive(enum) for enum in service.enumerations)

    methods = []
    for procedure in service.procedures:
        if not is_pascal_case(procedure.name):
            logger.debug("Skipping %s.%s: not a bindable name", service.name, procedure.name)
            continue
        methods.append(build_method(service, procedure))

    _deduplicate_method_names(methods)

    logger.info(
        "Service %s: %d classes, %d enumerations, %d methods",
        service.name, len(service.classes), len(service.enumerations), len(methods),
    )

    return {
        "name": service.name,
        "module": to_snake_case(service.name),
        "struct": to_pascal_case(service.name),
        "directives": directives,
        "methods": methods,
    }


def build_context(services: list[ServiceDescriptor]) -> dict[str, Any]:
    """Build the full template context for services.rs.j2."""
    contexts = [build_service_context(service) for service in services]
    return {
        "services": contexts,
        "schema_module": SCHEMA_MODULE,
        "client_type": CLIENT_TYPE,
        "service_count": len(contexts),
        "method_count": sum(len(s["methods"]) for s in contexts),
    }
