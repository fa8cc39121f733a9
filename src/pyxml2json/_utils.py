"""Escaping helpers."""

from __future__ import annotations

from pyxml2json._constants import SPECIAL_CHARS

_ESCAPE_TABLE = str.maketrans(dict(SPECIAL_CHARS))


def escape_literal(text: str) -> str:
    """Escape a string for use inside a JSON string literal.

    Only backslash and double quote are escaped. Each character is replaced
    once, so escape sequences are never escaped again. Control characters
    are passed through untouched.
    """
    return text.translate(_ESCAPE_TABLE)


def quote(text: str) -> str:
    """Wrap an already escaped literal in double quotes."""
    return f'"{text}"'
