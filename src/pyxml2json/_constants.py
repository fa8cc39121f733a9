"""Defaults and fixed tables for XML-to-JSON conversion."""

DEFAULT_ATTRIBUTE_PREFIX = "@"
"""Prepended to attribute names to tell them apart from child elements."""

DEFAULT_CONTENT_ID = "#content"
"""Key holding the direct text content of a tag."""

DEFAULT_CHILD_GROUP_SUFFIX = "s"
"""Appended to a child name that occurs more than once among its siblings."""

SPECIAL_CHARS: tuple[tuple[str, str], ...] = (
    ("\\", "\\\\"),
    ('"', '\\"'),
)
"""Characters escaped inside JSON string literals, with their replacements."""

FIELD_SEPARATOR = ", "
KEY_SEPARATOR = ": "

DEFAULT_MAX_DEPTH = 200
"""Maximum element nesting depth, root included (CWE-674 prevention)."""
