"""Documentation generator for compiled contracts.

Reads JSON contract descriptions and emits, per contract:
    <Contract>.user.json      - NatSpec user documentation
    <Contract>.dev.json       - NatSpec developer documentation
    <Contract>.abi.json       - ABI
    <Contract>.interface.txt  - One-line interface declaration
    <Contract>.markdown.md    - Markdown reference page
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from . import config
from .errors import NatdocError
from .generators import generate_contract_markdown
from .handler import DocumentationType, documentation
from .loader import load_contracts
from .models import Contract
from .validators import ValidationResult, compute_coverage, validate_contract

_KINDS = [k.value for k in DocumentationType] + ["markdown"]

_EXTENSIONS = {
    "user": "json",
    "dev": "json",
    "abi": "json",
    "interface": "txt",
    "markdown": "md",
}

# Kinds built from doc comments; abi and interface never read them
_COMMENT_KINDS = frozenset({"user", "dev", "markdown"})


def parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="natdoc",
        description=__doc__,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("files", nargs="+", type=Path, help="JSON contract descriptions")
    parser.add_argument(
        "--kind",
        choices=_KINDS,
        default="dev",
        help="Document to build (default: dev)",
    )
    parser.add_argument(
        "--output",
        type=Path,
        help="Directory to write documents to (default: print to stdout)",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        default=config.STRICT,
        help="Treat undocumented functions as errors",
    )
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    return parser.parse_args(argv)


def _render(contract: Contract, kind: str) -> str:
    if kind == "markdown":
        return generate_contract_markdown(contract)
    return documentation(contract, kind)


def main(argv: list[str] | None = None) -> int:
    """Generate documentation for every contract in the given files."""
    args = parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else config.LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    print("Loading contracts...", file=sys.stderr)
    contracts: list[Contract] = []
    for path in args.files:
        try:
            loaded = load_contracts(path)
        except (OSError, NatdocError) as e:
            print(f"  ✗ {path}: {e}", file=sys.stderr)
            return 1
        contracts.extend(loaded)
        print(f"  ✓ {path}: {len(loaded)} contract(s)", file=sys.stderr)

    validation = ValidationResult()
    if args.kind in _COMMENT_KINDS:
        for contract in contracts:
            validation.extend(validate_contract(contract, strict=args.strict))

    for warning in validation.warnings:
        print(f"  ⚠ {warning}", file=sys.stderr)
    if validation.errors:
        print("\nValidation errors:", file=sys.stderr)
        for err in validation.errors:
            print(f"  ✗ {err}", file=sys.stderr)
        return 1

    print(f"\nCoverage: {compute_coverage(contracts):.0%}", file=sys.stderr)

    if args.output:
        args.output.mkdir(parents=True, exist_ok=True)
        print("\nGenerated:", file=sys.stderr)

    for contract in contracts:
        try:
            text = _render(contract, args.kind)
        except NatdocError as e:
            print(f"  ✗ {contract.name}: {e}", file=sys.stderr)
            return 1

        if args.output:
            target = args.output / f"{contract.name}.{args.kind}.{_EXTENSIONS[args.kind]}"
            target.write_text(text + "\n")
            print(f"  {target}", file=sys.stderr)
        else:
            print(text)

    return 0


if __name__ == "__main__":
    sys.exit(main())
