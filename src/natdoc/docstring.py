"""
Line-oriented parser for NatSpec documentation comments.

A comment is scanned once, left to right. A line whose first `@` appears
before its newline opens a tag; any other line continues whichever tag
was opened last. A comment that starts without a tag is read as `@notice`.

Example:
    acc = parse_docstring(
        "@notice Send tokens.\\n@param to Recipient\\naddress\\n",
        CommentOwner.FUNCTION,
    )
    acc.notice        # "Send tokens."
    acc.params        # [("to", "Recipient address")]
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from .errors import DocstringParsingError, InternalError

__all__ = [
    "CommentOwner",
    "DocAccumulator",
    "DocTag",
    "parse_docstring",
]


class DocTag(Enum):
    """The tag currently open for continuation lines."""

    NONE = "none"
    DEV = "dev"
    NOTICE = "notice"
    RETURN = "return"
    AUTHOR = "author"
    TITLE = "title"
    PARAM = "param"


class CommentOwner(Enum):
    """Kind of declaration a comment is attached to."""

    CONTRACT = "contract"
    FUNCTION = "function"


# Tag name -> tag. DocTag.NONE is never spelled in a comment.
_TAG_NAMES: dict[str, DocTag] = {
    tag.value: tag for tag in DocTag if tag is not DocTag.NONE
}

# (tag, owner) -> accumulator field. A missing pair is illegal in that context.
# @param is not listed: it appends to DocAccumulator.params instead.
_TAG_FIELDS: dict[tuple[DocTag, CommentOwner], str] = {
    (DocTag.NOTICE, CommentOwner.CONTRACT): "notice",
    (DocTag.NOTICE, CommentOwner.FUNCTION): "notice",
    (DocTag.DEV, CommentOwner.CONTRACT): "dev",
    (DocTag.DEV, CommentOwner.FUNCTION): "dev",
    (DocTag.RETURN, CommentOwner.CONTRACT): "returns",
    (DocTag.RETURN, CommentOwner.FUNCTION): "returns",
    (DocTag.AUTHOR, CommentOwner.CONTRACT): "contract_author",
    (DocTag.AUTHOR, CommentOwner.FUNCTION): "function_author",
    (DocTag.TITLE, CommentOwner.CONTRACT): "title",
}


@dataclass
class DocAccumulator:
    """
    In-progress result of parsing one comment.

    Empty strings mean "not documented". `params` keeps every @param in the
    order written, including repeated names.
    """

    title: str = ""
    notice: str = ""
    contract_author: str = ""
    function_author: str = ""
    dev: str = ""
    returns: str = ""
    params: list[tuple[str, str]] = field(default_factory=list)
    last_tag: DocTag = DocTag.NONE

    def reset(self) -> None:
        """Clear all fields before parsing the next declaration's comment."""
        self.title = ""
        self.notice = ""
        self.contract_author = ""
        self.function_author = ""
        self.dev = ""
        self.returns = ""
        self.params = []
        self.last_tag = DocTag.NONE


def _line_end(text: str, pos: int) -> int:
    """Index of the next newline at or after pos, or len(text)."""
    nl = text.find("\n", pos)
    return len(text) if nl == -1 else nl


def _space_or_end(text: str, pos: int) -> int:
    space = text.find(" ", pos)
    return len(text) if space == -1 else space


def _skip_line(nl: int, end: int) -> int:
    return end if nl == end else nl + 1


def _join(current: str, line: str, appending: bool) -> str:
    """Append a line to a field, separating words on continuation."""
    if appending and current and line and not line.startswith(" "):
        return current + " " + line
    return current + line


def _field_for(tag: DocTag, owner: CommentOwner) -> str:
    try:
        return _TAG_FIELDS[(tag, owner)]
    except KeyError:
        raise DocstringParsingError(
            f"@{tag.value} tag is not legal in {owner.value} comments",
            tag=tag.value,
        ) from None


def _route(
    acc: DocAccumulator,
    tag: DocTag,
    owner: CommentOwner,
    line: str,
    appending: bool,
) -> None:
    """Apply one line of text to the field the tag writes in this context."""
    if tag is DocTag.PARAM:
        # Continuation of the most recently added @param
        if not acc.params:
            raise InternalError(
                "Tried to append to an empty parameter list", tag=tag.value
            )
        name, desc = acc.params[-1]
        acc.params[-1] = (name, _join(desc, line, appending))
    else:
        name = _field_for(tag, owner)
        setattr(acc, name, _join(getattr(acc, name), line, appending))
    acc.last_tag = tag


def _parse_param(acc: DocAccumulator, text: str, pos: int) -> int:
    end = len(text)
    space = text.find(" ", pos)
    if space == -1:
        raise DocstringParsingError(
            f"End of param name not found: {text[pos:]!r}", tag="param"
        )
    name = text[pos:space]
    nl = _line_end(text, space + 1)
    acc.params.append((name, text[space + 1 : nl]))
    acc.last_tag = DocTag.PARAM
    return _skip_line(nl, end)


def _parse_tag(
    acc: DocAccumulator, text: str, pos: int, tag_name: str, owner: CommentOwner
) -> int:
    """Handle an explicit (or implicit @notice) tag whose body starts at pos."""
    tag = _TAG_NAMES.get(tag_name)
    if tag is None:
        raise DocstringParsingError(f"Unknown tag @{tag_name} encountered")
    if tag is DocTag.PARAM:
        return _parse_param(acc, text, pos)

    nl = _line_end(text, pos)
    _route(acc, tag, owner, text[pos:nl], appending=False)
    return _skip_line(nl, len(text))


def _append_line(
    acc: DocAccumulator, text: str, pos: int, owner: CommentOwner
) -> int:
    """Treat the line at pos as a continuation of the open tag."""
    nl = _line_end(text, pos)
    _route(acc, acc.last_tag, owner, text[pos:nl], appending=True)
    return _skip_line(nl, len(text))


def parse_docstring(
    text: str,
    owner: CommentOwner,
    acc: DocAccumulator | None = None,
) -> DocAccumulator:
    """
    Parse one documentation comment into an accumulator.

    Args:
        text: Raw comment text, newline-delimited.
        owner: Whether the comment documents a contract or a function.
        acc: Accumulator to fill. A fresh one is created when omitted;
            callers reusing one must reset() it between comments.

    Returns:
        The filled accumulator.

    Raises:
        DocstringParsingError: On an unterminated or unknown tag, a @param
            without a name, or a tag used in the wrong context.
    """
    if acc is None:
        acc = DocAccumulator()

    pos = 0
    end = len(text)
    while pos < end:
        nl = _line_end(text, pos)
        at = text.find("@", pos, nl)

        if at != -1:
            name_end = min(_line_end(text, at), _space_or_end(text, at))
            if name_end == end:
                raise DocstringParsingError(
                    f"End of tag {text[at:]!r} not found"
                )
            pos = _parse_tag(acc, text, name_end + 1, text[at + 1 : name_end], owner)
        elif acc.last_tag is not DocTag.NONE:
            pos = _append_line(acc, text, pos, owner)
        elif pos == 0:
            # No leading tag: the comment is an implicit @notice
            pos = _parse_tag(acc, text, pos, DocTag.NOTICE.value, owner)
        else:
            pos = _skip_line(nl, end)

    return acc

