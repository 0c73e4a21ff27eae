"""Entry point: python -m rpcgen

Reads every definition in service_definitions/ and writes the Rust
client bindings to stdout or --output.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from .codegen import generate, write_output
from .errors import SchemaError
from .loader import DEFINITIONS_DIR


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Generate Rust RPC client bindings from service definitions")
    parser.add_argument("--definitions", default=DEFINITIONS_DIR, type=Path, help="Directory of JSON service definitions")
    parser.add_argument("--output", default=Path("-"), type=Path, help="Output file for the generated bindings (- for stdout)")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log each file and skipped procedure")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        if str(args.output) == "-":
            context = generate(args.definitions, sys.stdout)
            target = "<stdout>"
        else:
            context = write_output(args.definitions, args.output)
            target = args.output
    except SchemaError as e:
        raise SystemExit(f"error: {e}") from e

    print(
        f"Generated {target} ({context['service_count']} services, {context['method_count']} methods)",
        file=sys.stderr,
    )


if __name__ == "__main__":
    main()
