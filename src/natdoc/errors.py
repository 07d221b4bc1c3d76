"""Exceptions raised while building contract documentation."""

from __future__ import annotations


class NatdocError(Exception):
    """Base exception for natdoc operations."""

    def __init__(
        self,
        message: str,
        tag: str | None = None,
        declaration: str | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.tag = tag
        self.declaration = declaration

    def __str__(self) -> str:
        context = []
        if self.tag is not None:
            context.append(f"tag @{self.tag}")
        if self.declaration is not None:
            context.append(f"in {self.declaration}")
        if not context:
            return self.message
        return f"{self.message} ({', '.join(context)})"


class DocstringParsingError(NatdocError):
    """Raised when a documentation comment is malformed (e.g., unknown tag)."""

    pass


class InternalError(NatdocError):
    """Raised when the contract model violates an assumption of the assemblers."""

    pass


class ModelError(NatdocError):
    """Raised when a contract description cannot be turned into a model."""

    pass
