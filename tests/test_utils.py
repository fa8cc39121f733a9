"""Utility function tests."""

from pyxml2json._constants import SPECIAL_CHARS
from pyxml2json._utils import escape_literal, quote


class TestEscapeLiteral:
    def test_no_special_chars(self):
        assert escape_literal("hello") == "hello"

    def test_double_quote(self):
        assert escape_literal('a"b') == 'a\\"b'

    def test_backslash(self):
        assert escape_literal("a\\b") == "a\\\\b"

    def test_no_double_escaping(self):
        assert escape_literal('\\"') == '\\\\\\"'

    def test_control_characters_untouched(self):
        assert escape_literal("a\nb\tc") == "a\nb\tc"

    def test_unicode_untouched(self):
        assert escape_literal("café") == "café"

    def test_empty(self):
        assert escape_literal("") == ""

    def test_table_covers_backslash_and_quote(self):
        assert [char for char, _ in SPECIAL_CHARS] == ["\\", '"']


class TestQuote:
    def test_wraps(self):
        assert quote("a") == '"a"'
