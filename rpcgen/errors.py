"""Exceptions raised while reading service definitions."""

from __future__ import annotations


class SchemaError(Exception):
    """Base exception for service definition errors."""

    def __init__(self, message: str, schema_path: str | None = None) -> None:
        self.schema_path = schema_path
        full_message = f"{message}" if not schema_path else f"[{schema_path}] {message}"
        super().__init__(full_message)


class SchemaValidationError(SchemaError):
    """Raised when a definition does not have the expected shape."""

    def __init__(
        self,
        message: str,
        schema_path: str | None = None,
        field: str | None = None,
    ) -> None:
        self.field = field
        self.reason = message
        if field:
            message = f"Field '{field}': {message}"
        super().__init__(message, schema_path)
