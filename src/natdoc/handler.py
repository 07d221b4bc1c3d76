"""Single entry point selecting which document to build for a contract."""

from __future__ import annotations

import logging
from enum import Enum

from .abi import abi_interface, interface_text
from .errors import InternalError
from .models import Contract
from .natspec import dev_documentation, user_documentation

log = logging.getLogger(__name__)


class DocumentationType(Enum):
    USER = "user"
    DEV = "dev"
    ABI = "abi"
    INTERFACE = "interface"


_BUILDERS = {
    DocumentationType.USER: user_documentation,
    DocumentationType.DEV: dev_documentation,
    DocumentationType.ABI: abi_interface,
    DocumentationType.INTERFACE: interface_text,
}


def documentation(contract: Contract, kind: DocumentationType | str) -> str:
    """
    Build one document for a contract.

    Args:
        contract: The contract model.
        kind: A DocumentationType or its value ("user", "dev", "abi", "interface").

    Returns:
        The serialized document.

    Raises:
        DocstringParsingError: If a doc comment is malformed (user/dev only).
        InternalError: If the kind is unknown or the model is inconsistent.
    """
    try:
        kind = DocumentationType(kind)
    except ValueError:
        raise InternalError(f"Unknown documentation type: {kind!r}") from None

    log.debug(f"Building {kind.value} documentation for {contract.name}")
    return _BUILDERS[kind](contract)
