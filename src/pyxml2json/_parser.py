"""Lenient XML parser producing Tag trees, built on a Lark LALR grammar."""

from __future__ import annotations

import re
import sys

from lark import Lark, Token, Transformer, Tree
from lark.exceptions import UnexpectedEOF, UnexpectedInput, UnexpectedToken, VisitError

from pyxml2json._constants import DEFAULT_MAX_DEPTH
from pyxml2json._errors import (
    ERR_MSG_DUPLICATE_ATTRIBUTE,
    ERR_MSG_MALFORMED_XML,
    ERR_MSG_MAX_DEPTH_EXCEEDED,
    ERR_MSG_MISMATCHED_TAG,
    ERR_MSG_TEXT_OUTSIDE_ROOT,
    ERR_MSG_UNEXPECTED_EOF,
    MaxDepthExceededError,
    XmlParseError,
)
from pyxml2json._logging import get_logger
from pyxml2json.tag import Tag

log = get_logger(__name__)

# Whitespace between markup is lexed as TEXT so that the contextual lexer
# never has to choose between TEXT and _S in the same parser state.
XML_GRAMMAR = r"""
start: _misc* element _misc*

_misc: TEXT | _COMMENT | _PI | _DOCTYPE

element: "<" _S? NAME attribute* _S? "/>"                                  -> empty_element
        | "<" _S? NAME attribute* _S? ">" _content* "</" _S? NAME _S? ">"  -> element

attribute: _S NAME _S? "=" _S? VALUE

_content: TEXT | CDATA | element | _COMMENT | _PI

NAME: /[^\W\d][\w.:-]*/
VALUE: /"[^"]*"|'[^']*'/
TEXT: /[^<]+/
CDATA: /<!\[CDATA\[.*?\]\]>/s
_COMMENT: /<!--.*?-->/s
_PI: /<\?.*?\?>/s
_DOCTYPE: /<!DOCTYPE(?:[^>\[]|\[.*?\])*>/is
_S: /\s+/
"""

_ENTITY_RE = re.compile(r"&(#[0-9]+|#x[0-9a-fA-F]+|amp|lt|gt|quot|apos);?")

_XML_WHITESPACE = " \t\r\n"

_NAMED_ENTITIES = {
    "amp": "&",
    "lt": "<",
    "gt": ">",
    "quot": '"',
    "apos": "'",
}


def _decode_entity(match: re.Match[str]) -> str:
    ref = match.group(1)
    if not ref.startswith("#"):
        return _NAMED_ENTITIES[ref]
    code = int(ref[2:], 16) if ref.startswith("#x") else int(ref[1:])
    if code > sys.maxunicode:
        return match.group(0)
    return chr(code)


def _join_content(pieces: list[Token]) -> str:
    """Join the direct TEXT and CDATA pieces of an element.

    Literal whitespace is trimmed at both ends before entities are decoded,
    so encoded whitespace such as ``&#160;`` survives. CDATA is kept verbatim.
    """
    parts = [[piece.type, str(piece)] for piece in pieces]
    for part in parts:
        if part[0] != "TEXT":
            break
        part[1] = part[1].lstrip(_XML_WHITESPACE)
        if part[1]:
            break
    for part in reversed(parts):
        if part[0] != "TEXT":
            break
        part[1] = part[1].rstrip(_XML_WHITESPACE)
        if part[1]:
            break
    return "".join(
        decode_entities(text) if kind == "TEXT" else text[len("<![CDATA[") : -len("]]>")]
        for kind, text in parts
    )


def decode_entities(text: str) -> str:
    """Replace character and predefined entity references.

    The terminating ``;`` is optional. Unknown entities are left as they are.
    """
    return _ENTITY_RE.sub(_decode_entity, text)


class _TagBuilder(Transformer):
    """Turns the Lark parse tree into Tag objects."""

    def start(self, children: list) -> Tag:
        root = None
        for child in children:
            if isinstance(child, Tag):
                root = child
            elif child.strip():
                raise XmlParseError(
                    ERR_MSG_TEXT_OUTSIDE_ROOT,
                    f"unexpected text {child.strip()!r} at line {child.line}, "
                    f"column {child.column}",
                    line=child.line,
                    column=child.column,
                )
        return root

    def attribute(self, children: list) -> tuple[Token, str]:
        name, value = children
        return name, decode_entities(value[1:-1])

    def empty_element(self, children: list) -> Tag:
        name, *attributes = children
        return Tag(name=str(name), attributes=self._attributes(name, attributes))

    def element(self, children: list) -> Tag:
        name, *body, closing = children
        if closing != name:
            raise XmlParseError(
                f"{ERR_MSG_MISMATCHED_TAG} at line {closing.line}, column {closing.column}",
                f"expected </{name}> but found </{closing}> at line {closing.line}, "
                f"column {closing.column}",
                line=closing.line,
                column=closing.column,
            )

        attributes = [c for c in body if isinstance(c, tuple)]
        tags = [c for c in body if isinstance(c, Tag)]
        text = [c for c in body if isinstance(c, Token)]

        return Tag(
            name=str(name),
            attributes=self._attributes(name, attributes),
            content=_join_content(text),
            children=tuple(tags),
        )

    @staticmethod
    def _attributes(tag_name: Token, pairs: list[tuple[Token, str]]) -> dict[str, str]:
        result: dict[str, str] = {}
        for name, value in pairs:
            if name in result:
                raise XmlParseError(
                    f"{ERR_MSG_DUPLICATE_ATTRIBUTE} at line {name.line}, column {name.column}",
                    f"attribute {name!s} repeated on <{tag_name}> at line {name.line}, "
                    f"column {name.column}",
                    line=name.line,
                    column=name.column,
                )
            result[str(name)] = value
        return result


_lark = Lark(XML_GRAMMAR, parser="lalr")


def _parse_error(exc: UnexpectedInput) -> XmlParseError:
    at_end = isinstance(exc, UnexpectedToken) and exc.token.type == "$END"
    if at_end or isinstance(exc, UnexpectedEOF) or exc.line < 1:
        return XmlParseError(ERR_MSG_UNEXPECTED_EOF, str(exc), wrapped=exc)
    return XmlParseError(
        f"{ERR_MSG_MALFORMED_XML} at line {exc.line}, column {exc.column}",
        str(exc),
        wrapped=exc,
        line=exc.line,
        column=exc.column,
    )


def _check_depth(tree: Tree, max_depth: int) -> None:
    """Reject element nesting deeper than max_depth before building Tags."""
    stack = [(tree, 0)]
    while stack:
        node, depth = stack.pop()
        if node.data in ("element", "empty_element"):
            depth += 1
            if depth > max_depth:
                name = node.children[0]
                raise MaxDepthExceededError(
                    ERR_MSG_MAX_DEPTH_EXCEEDED,
                    f"element <{name}> at line {name.line}, column {name.column} "
                    f"is at depth {depth}, limit is {max_depth}",
                )
        stack.extend((child, depth) for child in node.children if isinstance(child, Tree))


def parse(xml_text: str, *, max_depth: int = DEFAULT_MAX_DEPTH) -> Tag:
    """Parse an XML document into its root Tag.

    Raises:
        XmlParseError: If the document is malformed.
        MaxDepthExceededError: If elements nest deeper than max_depth.
    """
    try:
        tree = _lark.parse(xml_text)
    except UnexpectedInput as e:
        err = _parse_error(e)
        log.debug("xml parse failed", line=err.line, column=err.column, details=err.internal())
        raise err from e

    _check_depth(tree, max_depth)

    try:
        return _TagBuilder().transform(tree)
    except VisitError as e:
        if isinstance(e.orig_exc, XmlParseError):
            err = e.orig_exc
            log.debug("xml parse failed", line=err.line, column=err.column, details=err.internal())
            raise err from None
        raise
