"""Convert schema names into Rust identifiers.

Two casings are used in generated code:
  - type style (PascalCase): service structs
  - member style (snake_case): modules, methods, parameters

Word boundaries:
  - delimiters: underscore, hyphen, period, whitespace
  - lower -> upper:          getName     -> get | Name
  - end of an acronym:       HTTPServer  -> HTTP | Server
  - letter <-> digit:        Vector3D    -> Vector | 3 | D

Any other character that cannot appear in an identifier is dropped.

Examples:
  SpaceCenter       -> space_center / SpaceCenter
  get_active_vessel -> get_active_vessel / GetActiveVessel
  HTTPServer        -> http_server / HttpServer
  KRPC              -> krpc / Krpc
"""

from __future__ import annotations

import re

_DELIMITERS = re.compile(r"[_\-.\s]+")

_INVALID_CHARS = re.compile(r"[^A-Za-z0-9]")

_WORD_BOUNDARY = re.compile(
    r"(?<=[a-z])(?=[A-Z])"
    r"|(?<=[A-Z])(?=[A-Z][a-z])"
    r"|(?<=[A-Za-z])(?=\d)"
    r"|(?<=\d)(?=[A-Za-z])"
)

RUST_KEYWORDS: frozenset[str] = frozenset({
    "abstract", "as", "async", "await", "become", "box", "break", "const",
    "continue", "crate", "do", "dyn", "else", "enum", "extern", "false",
    "final", "fn", "for", "if", "impl", "in", "let", "loop", "macro",
    "match", "mod", "move", "mut", "override", "priv", "pub", "ref",
    "return", "self", "Self", "static", "struct", "super", "trait", "true",
    "try", "type", "typeof", "union", "unsafe", "unsized", "use", "virtual",
    "where", "while", "yield",
})

# Keywords that are not allowed as raw identifiers
_NON_RAW_KEYWORDS = frozenset({"crate", "self", "Self", "super"})


def split_words(name: str) -> list[str]:
    """Split an identifier into its words."""
    words: list[str] = []
    for chunk in _DELIMITERS.split(name):
        chunk = _INVALID_CHARS.sub("", chunk)
        words.extend(w for w in _WORD_BOUNDARY.split(chunk) if w)
    return words


def _capitalize_words(name: str) -> str:
    return "".join(w[:1].upper() + w[1:].lower() for w in split_words(name))


def to_snake_case(name: str) -> str:
    """Convert any identifier to snake_case."""
    return "_".join(w.lower() for w in split_words(name))


def to_pascal_case(name: str) -> str:
    """Convert any identifier to PascalCase.

    Single-letter words run together on the first pass (a_b -> AB) and
    split differently on the next (AB -> Ab), so passes repeat until the
    name is stable. Each pass can only remove capitals, so this ends.
    """
    pascal = _capitalize_words(name)
    while True:
        again = _capitalize_words(pascal)
        if again == pascal:
            return pascal
        pascal = again


def is_pascal_case(name: str) -> bool:
    """Check whether a raw schema name is already PascalCase.

    Only procedures named this way are bound; the rest are internal.
    """
    return name[:1].isupper() and to_pascal_case(name) == name


def escape_keyword(ident: str) -> str:
    """Make an identifier safe to use as a Rust binding name."""
    if ident in _NON_RAW_KEYWORDS:
        return f"{ident}_"
    if ident in RUST_KEYWORDS:
        return f"r#{ident}"
    return ident
