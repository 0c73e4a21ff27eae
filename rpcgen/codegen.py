"""Fold definition documents into services and render the Rust output.

Every document is read before anything is written, so a bad document
aborts the run without partial output.
"""

from __future__ import annotations

import logging
from functools import reduce
from pathlib import Path
from typing import Any, TextIO

import jinja2

from .context_builder import build_context
from .errors import SchemaValidationError
from .loader import list_definition_files, load_definition
from .model import ServiceDescriptor
from .schema_parser import parse_document

logger = logging.getLogger(__name__)

TEMPLATE_DIR = Path(__file__).parent / "templates"
TEMPLATE_NAME = "services.rs.j2"


def add_document(services: list[ServiceDescriptor], path: Path) -> list[ServiceDescriptor]:
    """Return the services accumulated so far plus those defined in ``path``."""
    document = load_definition(path)
    try:
        parsed = parse_document(document)
    except SchemaValidationError as e:
        raise SchemaValidationError(e.reason, str(path), e.field) from e
    logger.debug("%s: %d services", path, len(parsed))
    return services + parsed


def collect_services(directory: Path | None = None) -> list[ServiceDescriptor]:
    """Parse every definition file in a directory, in file name order."""
    return reduce(add_document, list_definition_files(directory), [])


_RUST_ESCAPES = {"\\": "\\\\", '"': '\\"', "\n": "\\n", "\r": "\\r", "\t": "\\t", "\0": "\\0"}


def rust_string(value: str) -> str:
    """Quote a value as a Rust string literal."""
    escaped = "".join(
        _RUST_ESCAPES.get(ch) or (ch if ch.isprintable() else f"\\u{{{ord(ch):x}}}")
        for ch in value
    )
    return f'"{escaped}"'


def render(context: dict[str, Any]) -> str:
    """Render the services template."""
    env = jinja2.Environment(
        loader=jinja2.FileSystemLoader(str(TEMPLATE_DIR)),
        keep_trailing_newline=True,
        trim_blocks=True,
        lstrip_blocks=True,
    )
    env.filters["rust_string"] = rust_string
    template = env.get_template(TEMPLATE_NAME)
    return template.render(**context)


def build_output(directory: Path | None = None) -> tuple[dict[str, Any], str]:
    """Build the template context for a definitions directory and render it."""
    context = build_context(collect_services(directory))
    return context, render(context)


def build(directory: Path | None = None) -> str:
    """Generate the Rust bindings for a definitions directory."""
    return build_output(directory)[1]


def generate(directory: Path | None, out: TextIO) -> dict[str, Any]:
    """Generate bindings and write them to ``out`` in one write.

    Returns the template context so callers can report on it.
    """
    context, output = build_output(directory)
    out.write(output)
    return context


def write_output(directory: Path | None, output_path: Path) -> dict[str, Any]:
    """Generate bindings into a file, creating its parent directory."""
    context, output = build_output(directory)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(output, encoding="utf-8")
    return context
