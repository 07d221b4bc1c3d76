"""ABI JSON and one-line interface text for a contract."""

from __future__ import annotations

import json
import logging
from typing import Any

from .errors import InternalError
from .models import Contract

log = logging.getLogger(__name__)


def _populate_parameters(
    names: list[str], types: list[str], declaration: str
) -> list[dict[str, str]]:
    """Zip parameter names and types into ABI input/output entries."""
    if len(names) != len(types):
        raise InternalError(
            f"Names and types vector size does not match ({len(names)} != {len(types)})",
            declaration=declaration,
        )
    return [{"name": name, "type": type_} for name, type_ in zip(names, types)]


def abi_entries(contract: Contract) -> list[dict[str, Any]]:
    """
    Build the ABI as a list of entries.

    Order: interface functions, then the constructor (if any), then events.
    """
    abi: list[dict[str, Any]] = []

    for function in contract.interface_functions():
        abi.append(
            {
                "type": "function",
                "name": function.name,
                "constant": function.constant,
                "inputs": _populate_parameters(
                    function.parameter_names,
                    function.parameter_type_names,
                    function.signature,
                ),
                "outputs": _populate_parameters(
                    function.return_parameter_names,
                    function.return_parameter_type_names,
                    function.signature,
                ),
            }
        )

    if contract.constructor is not None:
        abi.append(
            {
                "type": "constructor",
                "inputs": _populate_parameters(
                    contract.constructor.parameter_names,
                    contract.constructor.parameter_type_names,
                    f"{contract.name} constructor",
                ),
            }
        )

    for event in contract.interface_events():
        abi.append(
            {
                "type": "event",
                "name": event.name,
                "anonymous": event.anonymous,
                "inputs": [
                    {"name": p.name, "type": p.type, "indexed": p.indexed}
                    for p in event.parameters
                ],
            }
        )

    log.debug(f"ABI for {contract.name}: {len(abi)} entries")
    return abi


def abi_interface(contract: Contract) -> str:
    """Serialize the ABI as compact JSON."""
    return json.dumps(abi_entries(contract), separators=(",", ":"))


def _parameter_list(names: list[str], types: list[str], declaration: str) -> str:
    params = _populate_parameters(names, types, declaration)
    return "(" + ",".join(f"{p['type']} {p['name']}" for p in params) + ")"


def interface_text(contract: Contract) -> str:
    """
    Render the contract as a single-line interface declaration.

    Example:
        contract Token{function Token(uint256 supply);function balance(address who)constant returns(uint256 amount);}
    """
    ret = ("library " if contract.library else "contract ") + contract.name + "{"

    # Libraries carry their own type definitions so callers can compile against them
    if contract.library:
        for struct in contract.structs:
            ret += "struct " + struct.name + "{"
            for member in struct.members:
                ret += f"{member.type} {member.name};"
            ret += "}"
        for enum in contract.enums:
            ret += "enum " + enum.name + "{" + ",".join(enum.members) + "}"

    if contract.constructor is not None:
        ret += (
            "function "
            + contract.name
            + _parameter_list(
                contract.constructor.parameter_names,
                contract.constructor.parameter_type_names,
                f"{contract.name} constructor",
            )
            + ";"
        )

    for function in contract.interface_functions():
        ret += (
            "function "
            + function.name
            + _parameter_list(
                function.parameter_names,
                function.parameter_type_names,
                function.signature,
            )
            + ("constant " if function.constant else "")
        )
        if function.return_parameter_type_names:
            ret += "returns" + _parameter_list(
                function.return_parameter_names,
                function.return_parameter_type_names,
                function.signature,
            )
        elif ret.endswith(" "):
            ret = ret[:-1]
        ret += ";"

    return ret + "}"
