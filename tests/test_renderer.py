"""Tests for single token rendering."""

import pytest

from json_colorizer.frames import Frame
from json_colorizer.renderer import TokenRenderer
from json_colorizer.styles import resolve_styles
from json_colorizer.types import (
    EncodingError,
    Token,
    TokenKind,
    UnsupportedTokenError,
)


class TestTokenRenderer:
    """Tests for TokenRenderer class."""

    @pytest.fixture(autouse=True)
    def setup_renderer(self, tagged_formatter):
        """Set up test fixtures."""
        self.styles = resolve_styles(tagged_formatter)
        self.renderer = TokenRenderer(self.styles)
        self.root = Frame()
        self.key_frame = Frame(is_object=True, depth=1)
        self.value_frame = Frame(is_object=True, depth=1, expecting_value=True)
        self.array_frame = Frame(is_array=True, depth=1)

    def test_object_delimiters(self):
        """Test object delimiter decoration."""
        assert self.renderer.render(Token(TokenKind.DELIM, "{"), self.root) == "<object>{</object>"
        assert self.renderer.render(Token(TokenKind.DELIM, "}"), self.root) == "<object>}</object>"

    def test_array_delimiters(self):
        """Test array delimiter decoration."""
        assert self.renderer.render(Token(TokenKind.DELIM, "["), self.root) == "<array>[</array>"
        assert self.renderer.render(Token(TokenKind.DELIM, "]"), self.root) == "<array>]</array>"

    def test_number_verbatim(self):
        """Test that numbers keep their text."""
        token = Token(TokenKind.NUMBER, "1.500e+10")

        assert self.renderer.render(token, self.array_frame) == "<number>1.500e+10</number>"

    def test_booleans_and_null(self):
        """Test literal rendering."""
        assert self.renderer.render(Token(TokenKind.BOOL, True), self.root) == "<true>true</true>"
        assert self.renderer.render(Token(TokenKind.BOOL, False), self.root) == "<false>false</false>"
        assert self.renderer.render(Token(TokenKind.NULL), self.root) == "<null>null</null>"

    def test_string_as_key(self):
        """Test that strings in key position use field styles."""
        output = self.renderer.render(Token(TokenKind.STRING, "name"), self.key_frame)

        assert output == (
            '<field_quote>"</field_quote><field>name</field><field_quote>"</field_quote>'
        )

    def test_string_as_value(self):
        """Test that strings after a colon use string styles."""
        output = self.renderer.render(Token(TokenKind.STRING, "Alice"), self.value_frame)

        assert output == (
            '<string_quote>"</string_quote><string>Alice</string><string_quote>"</string_quote>'
        )

    def test_string_in_array_and_top_level(self):
        """Test that strings outside objects are values."""
        token = Token(TokenKind.STRING, "x")

        assert "<string>x</string>" in self.renderer.render(token, self.array_frame)
        assert "<string>x</string>" in self.renderer.render(token, self.root)

    def test_string_is_escaped(self):
        """Test escaping of string content."""
        token = Token(TokenKind.STRING, 'a"b\n')

        output = self.renderer.render(token, self.root)

        assert '<string>a\\"b\\n</string>' in output

    def test_html_escaping(self):
        """Test the HTML escaping switch."""
        renderer = TokenRenderer(self.styles, escape_html=True)

        output = renderer.render(Token(TokenKind.STRING, "<script>"), self.key_frame)

        assert "<field>\\u003cscript\\u003e</field>" in output

    def test_percent_in_string_is_not_a_template(self):
        """Test that string content is passed as an argument, not a template."""
        output = self.renderer.render(Token(TokenKind.STRING, "100% %s"), self.root)

        assert "<string>100% %s</string>" in output

    def test_unknown_token_kind(self):
        """Test that unknown kinds raise UnsupportedTokenError."""
        with pytest.raises(UnsupportedTokenError):
            self.renderer.render(Token("comment", "//"), self.root)

    def test_unknown_delimiter(self):
        """Test that unknown delimiters raise UnsupportedTokenError."""
        with pytest.raises(UnsupportedTokenError):
            self.renderer.render(Token(TokenKind.DELIM, ":"), self.root)

    def test_escaper_errors_propagate(self, monkeypatch):
        """Test that escaping failures surface unchanged."""
        def failing_escape(*args, **kwargs):
            raise EncodingError("cannot escape")

        monkeypatch.setattr("json_colorizer.renderer.escape_string", failing_escape)

        with pytest.raises(EncodingError, match="cannot escape"):
            self.renderer.render(Token(TokenKind.STRING, "x"), self.root)
