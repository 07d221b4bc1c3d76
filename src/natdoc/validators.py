"""Documentation validation and quality checks."""

from __future__ import annotations

from dataclasses import dataclass, field

from .docstring import CommentOwner, parse_docstring
from .errors import DocstringParsingError
from .models import Contract


@dataclass
class ValidationResult:
    """Results from documentation validation."""

    errors: list[str] = field(default_factory=list)  # Build fails if non-empty
    warnings: list[str] = field(default_factory=list)  # Printed but allowed

    def extend(self, other: ValidationResult) -> None:
        self.errors.extend(other.errors)
        self.warnings.extend(other.warnings)


def validate_contract(contract: Contract, strict: bool = False) -> ValidationResult:
    """Validate the doc comments of a contract.

    Checks:
    1. Interface functions should be documented (warning, error in strict mode)
    2. Documented functions should have @notice, @param for every parameter
       and @return when they return something (warning)
    3. Comments must parse (error)

    Args:
        contract: The contract to check
        strict: If True, undocumented functions are errors instead of warnings

    Returns:
        ValidationResult with errors and warnings
    """
    result = ValidationResult()

    if contract.documentation is not None:
        try:
            parse_docstring(contract.documentation, CommentOwner.CONTRACT)
        except DocstringParsingError as e:
            e.declaration = e.declaration or contract.name
            result.errors.append(str(e))

    for function in contract.interface_functions():
        label = f"{contract.name}.{function.signature}"

        if function.documentation is None:
            msg = f"{label}: undocumented"
            if strict:
                result.errors.append(msg)
            else:
                result.warnings.append(msg)
            continue

        try:
            acc = parse_docstring(function.documentation, CommentOwner.FUNCTION)
        except DocstringParsingError as e:
            e.declaration = e.declaration or function.signature
            result.errors.append(str(e))
            continue

        if not acc.notice:
            result.warnings.append(f"{label}: documented but missing @notice")

        documented = {name for name, _ in acc.params}
        for name in function.parameter_names:
            if name and name not in documented:
                result.warnings.append(f"{label}: parameter {name!r} missing @param")
        for name in sorted(documented - set(function.parameter_names)):
            result.errors.append(f"{label}: @param {name!r} is not a parameter")

        if function.returns and not acc.returns:
            result.warnings.append(f"{label}: documented but missing @return")

    return result


def compute_coverage(contracts: list[Contract]) -> float:
    """Compute the share of interface functions that carry a doc comment.

    Returns:
        Coverage between 0.0 and 1.0 (1.0 when there is nothing to document)
    """
    total = sum(len(c.interface_functions()) for c in contracts)
    documented = sum(
        sum(1 for f in c.interface_functions() if f.documentation is not None)
        for c in contracts
    )
    return documented / total if total > 0 else 1.0
