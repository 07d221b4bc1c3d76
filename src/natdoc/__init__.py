"""natdoc - NatSpec, ABI and interface documents for compiled contracts."""

from natdoc.abi import abi_entries, abi_interface, interface_text
from natdoc.docstring import CommentOwner, DocAccumulator, DocTag, parse_docstring
from natdoc.errors import DocstringParsingError, InternalError, ModelError, NatdocError
from natdoc.handler import DocumentationType, documentation
from natdoc.loader import contract_from_dict, load_contract, load_contracts
from natdoc.models import (
    Constructor,
    Contract,
    Enum,
    Event,
    EventParameter,
    Function,
    Parameter,
    Struct,
)
from natdoc.natspec import dev_doc, dev_documentation, user_doc, user_documentation

__all__ = [
    # Documents
    "DocumentationType",
    "documentation",
    "abi_entries",
    "abi_interface",
    "interface_text",
    "user_doc",
    "user_documentation",
    "dev_doc",
    "dev_documentation",
    # Parser
    "CommentOwner",
    "DocAccumulator",
    "DocTag",
    "parse_docstring",
    # Model
    "Constructor",
    "Contract",
    "Enum",
    "Event",
    "EventParameter",
    "Function",
    "Parameter",
    "Struct",
    "contract_from_dict",
    "load_contract",
    "load_contracts",
    # Errors
    "NatdocError",
    "DocstringParsingError",
    "InternalError",
    "ModelError",
]
