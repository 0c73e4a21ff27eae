"""Generate Rust RPC client bindings from JSON service definitions."""

from .codegen import build, generate
from .errors import SchemaError, SchemaValidationError

__all__ = ["build", "generate", "SchemaError", "SchemaValidationError"]

__version__ = "0.1.0"
