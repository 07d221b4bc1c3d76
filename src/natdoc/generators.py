"""Markdown reference pages built from the user and developer documents."""

from __future__ import annotations

from .models import Contract, Function
from .natspec import dev_doc, user_doc


def _slugify(name: str) -> str:
    """Convert a function signature to a markdown anchor slug."""
    # GitHub-style: lowercase, drop punctuation, spaces to hyphens
    return "".join(c for c in name.lower() if c.isalnum() or c in " -_").replace(
        " ", "-"
    )


def _declaration(function: Function) -> str:
    params = ", ".join(f"{p.type} {p.name}".rstrip() for p in function.parameters)
    line = f"function {function.name}({params})"
    if function.constant:
        line += " constant"
    if function.returns:
        returns = ", ".join(f"{p.type} {p.name}".rstrip() for p in function.returns)
        line += f" returns ({returns})"
    return line


def generate_contract_markdown(contract: Contract) -> str:
    """Generate the reference page for one contract.

    Raises:
        DocstringParsingError: If a doc comment is malformed.
    """
    dev = dev_doc(contract)
    user = user_doc(contract)

    kind = "Library" if contract.library else "Contract"
    lines = [
        "<!-- AUTO-GENERATED. DO NOT EDIT. Run `natdoc --kind markdown` to regenerate. -->",
        "",
        f"# {kind} {contract.name}",
        "",
    ]

    if "title" in dev:
        lines.append(f"**{dev['title']}**")
        lines.append("")
    if "author" in dev:
        lines.append(f"*Author: {dev['author']}*")
        lines.append("")

    documented = [
        f
        for f in contract.interface_functions()
        if f.signature in dev["methods"] or f.signature in user["methods"]
    ]

    if not documented:
        lines.append("*No documented functions.*")
        lines.append("")
        return "\n".join(lines)

    lines.extend(
        [
            "| Function | Description |",
            "|----------|-------------|",
        ]
    )
    for f in documented:
        notice = user["methods"].get(f.signature, {}).get("notice", "")
        desc = notice.replace("|", "\\|")
        lines.append(f"| [`{f.signature}`](#{_slugify(f.signature)}) | {desc} |")
    lines.append("")

    for f in documented:
        method = dev["methods"].get(f.signature, {})
        notice = user["methods"].get(f.signature, {}).get("notice")

        lines.extend(
            [
                f"## {f.signature}",
                "",
                "```solidity",
                _declaration(f),
                "```",
                "",
            ]
        )

        if notice:
            lines.append(notice)
            lines.append("")

        if "details" in method:
            lines.append(f"**Details:** {method['details']}")
            lines.append("")

        if "params" in method:
            lines.append("**Parameters:**")
            for name, desc in method["params"].items():
                lines.append(f"- `{name}`: {desc}")
            lines.append("")

        if "return" in method:
            lines.append(f"**Returns:** {method['return']}")
            lines.append("")

        if "author" in method:
            lines.append(f"*Author: {method['author']}*")
            lines.append("")

        lines.append("---")
        lines.append("")

    return "\n".join(lines)
