"""Build contract models from JSON descriptions."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from .errors import ModelError
from .models import (
    Constructor,
    Contract,
    Enum,
    Event,
    EventParameter,
    Function,
    Parameter,
    Struct,
)
from .schemas import ContractSchema, ParameterSchema


def _format_errors(e: ValidationError) -> str:
    """One "loc: msg" entry per validation error, e.g. "functions.0.name: Field required"."""
    parts = []
    for err in e.errors(include_context=False):
        loc = ".".join(str(part) for part in err["loc"])
        parts.append(f"{loc}: {err['msg']}" if loc else err["msg"])
    return "; ".join(parts)


def _parameters(params: list[ParameterSchema]) -> tuple[Parameter, ...]:
    return tuple(Parameter(name=p.name, type=p.type) for p in params)


def contract_from_dict(data: Any) -> Contract:
    """
    Build a Contract from its JSON description.

    Raises:
        ModelError: If a required key is missing or has the wrong type.
    """
    try:
        schema = ContractSchema.model_validate(data)
    except ValidationError as e:
        raise ModelError(f"invalid contract description: {_format_errors(e)}") from e

    return Contract(
        name=schema.name,
        library=schema.library,
        documentation=schema.documentation,
        constructor=(
            Constructor(parameters=_parameters(schema.constructor.inputs))
            if schema.constructor is not None
            else None
        ),
        functions=tuple(
            Function(
                name=f.name,
                signature=f.signature,
                parameters=_parameters(f.inputs),
                returns=_parameters(f.outputs),
                constant=f.constant,
                documentation=f.documentation,
            )
            for f in schema.functions
        ),
        events=tuple(
            Event(
                name=e.name,
                anonymous=e.anonymous,
                parameters=tuple(
                    EventParameter(name=p.name, type=p.type, indexed=p.indexed)
                    for p in e.inputs
                ),
            )
            for e in schema.events
        ),
        structs=tuple(
            Struct(name=s.name, members=_parameters(s.members)) for s in schema.structs
        ),
        enums=tuple(Enum(name=e.name, members=tuple(e.members)) for e in schema.enums),
    )


def load_contracts(path: Path) -> list[Contract]:
    """Load every contract described in a JSON file (one object or a list)."""
    try:
        data = json.loads(Path(path).read_text(encoding="utf-8"))
    except UnicodeDecodeError as e:
        raise ModelError(f"{path}: not valid UTF-8: {e}") from e
    except json.JSONDecodeError as e:
        raise ModelError(f"{path}: invalid JSON: {e}") from e

    if isinstance(data, list):
        return [contract_from_dict(item) for item in data]
    return [contract_from_dict(data)]


def load_contract(path: Path) -> Contract:
    """Load a file describing exactly one contract."""
    contracts = load_contracts(path)
    if len(contracts) != 1:
        raise ModelError(f"{path}: expected one contract, found {len(contracts)}")
    return contracts[0]
