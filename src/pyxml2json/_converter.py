"""Core Converter class - serializes a Tag tree into a JSON string."""

from __future__ import annotations

from collections.abc import Sequence
from io import StringIO

from pyxml2json._constants import DEFAULT_MAX_DEPTH, FIELD_SEPARATOR, KEY_SEPARATOR
from pyxml2json._errors import ERR_MSG_MAX_DEPTH_EXCEEDED, MaxDepthExceededError
from pyxml2json._utils import escape_literal, quote
from pyxml2json.config import ConverterConfig
from pyxml2json.tag import Tag


def _group_children(children: Sequence[Tag]) -> list[tuple[str, list[Tag]]]:
    """Group children by name, groups sorted by name, members in document order."""
    groups: dict[str, list[Tag]] = {}
    for child in children:
        groups.setdefault(child.name, []).append(child)
    return sorted(groups.items())


class Converter:
    """Writes the JSON form of a Tag tree.

    Every tag becomes one JSON object whose fields are, in this order:
    attributes sorted by name, the text content, and the child groups sorted
    by name. A group with a single member is written as an object, a larger
    group as an array under the suffixed name.
    """

    def __init__(
        self,
        config: ConverterConfig | None = None,
        max_depth: int = DEFAULT_MAX_DEPTH,
    ) -> None:
        self._w = StringIO()
        self._config = config or ConverterConfig()
        self._max_depth = max_depth
        self._depth = 0

    @property
    def result(self) -> str:
        return self._w.getvalue()

    def convert(self, root: Tag) -> str:
        """Write the document wrapper ``{"<root>": {...}}`` and return the result."""
        self._w.write("{")
        self._write_key(escape_literal(root.name))
        self.visit(root)
        self._w.write("}")
        return self.result

    def visit(self, tag: Tag) -> None:
        self._depth += 1
        try:
            if self._depth > self._max_depth:
                raise MaxDepthExceededError(
                    ERR_MSG_MAX_DEPTH_EXCEEDED,
                    f"tag <{tag.name}> at depth {self._depth} exceeds limit {self._max_depth}",
                )
            self._visit_fields(tag)
        finally:
            self._depth -= 1

    def _visit_fields(self, tag: Tag) -> None:
        self._w.write("{")
        first = True

        for key in sorted(tag.attributes):
            if not first:
                self._w.write(FIELD_SEPARATOR)
            first = False
            self._write_key(self._config.attribute_prefix + escape_literal(key))
            self._w.write(quote(escape_literal(tag.attributes[key])))

        if tag.content:
            if not first:
                self._w.write(FIELD_SEPARATOR)
            first = False
            self._write_key(self._config.content_id)
            self._w.write(quote(escape_literal(tag.content)))

        for name, members in _group_children(tag.children):
            if not first:
                self._w.write(FIELD_SEPARATOR)
            first = False
            if len(members) == 1:
                self._write_key(escape_literal(name))
                self.visit(members[0])
            else:
                self._write_key(escape_literal(name) + self._config.child_group_suffix)
                self._visit_array(members)

        self._w.write("}")

    def _visit_array(self, members: list[Tag]) -> None:
        self._w.write("[")
        for i, member in enumerate(members):
            if i:
                self._w.write(FIELD_SEPARATOR)
            self.visit(member)
        self._w.write("]")

    def _write_key(self, key: str) -> None:
        self._w.write(quote(key))
        self._w.write(KEY_SEPARATOR)
