"""pyxml2json - Convert XML documents to compact JSON text."""

from __future__ import annotations

try:
    from pyxml2json._version import __version__
except ModuleNotFoundError:  # editable install without VCS metadata
    __version__ = "0.0.0.dev0"

from pyxml2json._constants import DEFAULT_MAX_DEPTH
from pyxml2json._converter import Converter
from pyxml2json._errors import (
    ConversionError,
    InvalidConfigError,
    MaxDepthExceededError,
    XmlParseError,
)
from pyxml2json._logging import get_logger
from pyxml2json._parser import parse
from pyxml2json._utils import escape_literal
from pyxml2json.config import ConverterConfig
from pyxml2json.tag import Tag

__all__ = [
    "convert",
    "convert_tree",
    "serialize_tag",
    "escape_literal",
    "parse",
    "ConversionError",
    "ConverterConfig",
    "Converter",
    "InvalidConfigError",
    "MaxDepthExceededError",
    "Tag",
    "XmlParseError",
]

log = get_logger(__name__)


def convert(
    xml_text: str,
    *,
    config: ConverterConfig | None = None,
    max_depth: int = DEFAULT_MAX_DEPTH,
) -> str:
    """Convert an XML document to a JSON string.

    Args:
        xml_text: The XML document to convert.
        config: Key naming options. Defaults to ``ConverterConfig()``.
        max_depth: Maximum element nesting depth, root included. Defaults to 200.

    Returns:
        A single-line JSON object with the root tag name as its only key.

    Raises:
        XmlParseError: If the XML is malformed.
        MaxDepthExceededError: If elements nest deeper than max_depth.
    """
    root = parse(xml_text, max_depth=max_depth)
    return convert_tree(root, config=config, max_depth=max_depth)


def convert_tree(
    root: Tag,
    *,
    config: ConverterConfig | None = None,
    max_depth: int = DEFAULT_MAX_DEPTH,
) -> str:
    """Convert an already parsed tag tree to a JSON string.

    Any object with ``name``, ``attributes``, ``content`` and ``children``
    attributes is accepted in place of a Tag.
    """
    result = Converter(config, max_depth=max_depth).convert(root)
    log.debug("converted xml tree", root=root.name, length=len(result))
    return result


def serialize_tag(
    tag: Tag,
    *,
    config: ConverterConfig | None = None,
    max_depth: int = DEFAULT_MAX_DEPTH,
) -> str:
    """Serialize a single tag to a JSON object, without the root wrapper."""
    converter = Converter(config, max_depth=max_depth)
    converter.visit(tag)
    return converter.result
