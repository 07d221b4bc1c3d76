"""
User and developer documentation assembled from NatSpec comments.

Both documents key methods by external signature and keep them in the
order the contract lists its interface functions. Undocumented functions
never appear.
"""

from __future__ import annotations

import json
import logging
from typing import Any

from . import config
from .docstring import CommentOwner, DocAccumulator, parse_docstring
from .errors import DocstringParsingError, NatdocError
from .models import Contract

log = logging.getLogger(__name__)


def _parse(
    acc: DocAccumulator, text: str, owner: CommentOwner, declaration: str
) -> DocAccumulator:
    """Reset the accumulator and parse one comment, tagging errors with the declaration."""
    acc.reset()
    try:
        return parse_docstring(text, owner, acc)
    except NatdocError as e:
        if e.declaration is None:
            e.declaration = declaration
        raise


def user_doc(contract: Contract) -> dict[str, Any]:
    """
    Build the user document: {"methods": {signature: {"notice": ...}}}.

    @notice is the only user-facing tag, so a function documented only with
    e.g. @dev is left out.
    """
    acc = DocAccumulator()
    methods: dict[str, Any] = {}

    for function in contract.interface_functions():
        if function.documentation is None:
            continue
        _parse(acc, function.documentation, CommentOwner.FUNCTION, function.signature)
        if acc.notice:
            methods[function.signature] = {"notice": acc.notice}

    log.debug(f"User doc for {contract.name}: {len(methods)} methods")
    return {"methods": methods}


def _method_dev_doc(
    acc: DocAccumulator, parameter_names: list[str], signature: str
) -> dict[str, Any]:
    method: dict[str, Any] = {}

    if acc.dev:
        method["details"] = acc.dev
    if acc.function_author:
        method["author"] = acc.function_author

    params: dict[str, str] = {}
    for name, description in acc.params:
        if name not in parameter_names:
            raise DocstringParsingError(
                f'documented parameter "{name}" not found in the parameter list of the function.',
                tag="param",
                declaration=signature,
            )
        params[name] = description
    if params:
        method["params"] = params

    if acc.returns:
        method["return"] = acc.returns

    return method


def dev_doc(contract: Contract) -> dict[str, Any]:
    """
    Build the developer document.

    Top-level "author" and "title" come from the contract comment. Each
    method entry carries "details", "author", "params" and "return", with
    empty ones omitted; a method with none of them is omitted entirely.

    Raises:
        DocstringParsingError: If a comment is malformed or documents a
            parameter the function does not have.
    """
    acc = DocAccumulator()
    doc: dict[str, Any] = {}

    if contract.documentation is not None:
        _parse(acc, contract.documentation, CommentOwner.CONTRACT, contract.name)
        if acc.contract_author:
            doc["author"] = acc.contract_author
        if acc.title:
            doc["title"] = acc.title

    methods: dict[str, Any] = {}
    for function in contract.interface_functions():
        if function.documentation is None:
            continue
        _parse(acc, function.documentation, CommentOwner.FUNCTION, function.signature)
        method = _method_dev_doc(acc, function.parameter_names, function.signature)
        if method:
            methods[function.signature] = method

    doc["methods"] = methods
    log.debug(f"Dev doc for {contract.name}: {len(methods)} methods")
    return doc


def _dumps(doc: dict[str, Any], indent: int | None) -> str:
    return json.dumps(doc, indent=config.JSON_INDENT if indent is None else indent)


def user_documentation(contract: Contract, indent: int | None = None) -> str:
    """Serialize the user document as pretty-printed JSON."""
    return _dumps(user_doc(contract), indent)


def dev_documentation(contract: Contract, indent: int | None = None) -> str:
    """Serialize the developer document as pretty-printed JSON."""
    return _dumps(dev_doc(contract), indent)
