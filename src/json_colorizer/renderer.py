"""Rendering of single tokens into decorated text."""

from .escaper import escape_string
from .frames import Frame
from .styles import ResolvedStyles
from .types import StyleCategory, Token, TokenKind, UnsupportedTokenError


class TokenRenderer:
    """
    Maps one token to its decorated output.

    Strings are rendered as object keys or as string values depending on the
    frame they appear in.
    """

    def __init__(self, styles: ResolvedStyles, escape_html: bool = False,
                 ensure_ascii: bool = False):
        """
        Initialize the token renderer.

        Args:
            styles: Resolved decoration functions
            escape_html: Escape ``<``, ``>`` and ``&`` inside strings
            ensure_ascii: Escape non-ASCII characters inside strings
        """
        self.styles = styles
        self.escape_html = escape_html
        self.ensure_ascii = ensure_ascii

    def render(self, token: Token, frame: Frame) -> str:
        """
        Render a token.

        Args:
            token: Token to render
            frame: Frame the token appears in

        Returns:
            Decorated text

        Raises:
            EncodingError: If a string cannot be escaped
            UnsupportedTokenError: If the token kind is not part of JSON
        """
        kind = token.kind
        if kind is TokenKind.DELIM:
            return self.render_delim(token.value)
        if kind is TokenKind.NUMBER:
            return self.styles[StyleCategory.NUMBER]("%s", token.value)
        if kind is TokenKind.STRING:
            if frame.is_key_position:
                return self.render_field(token.value)
            return self.render_string(token.value)
        if kind is TokenKind.BOOL:
            if token.value:
                return self.styles[StyleCategory.TRUE]("true")
            return self.styles[StyleCategory.FALSE]("false")
        if kind is TokenKind.NULL:
            return self.styles[StyleCategory.NULL]("null")
        raise UnsupportedTokenError(
            f"Unknown token type {kind!r} encountered",
            context={"token": token},
        )

    def render_delim(self, delim: str) -> str:
        if delim in ("{", "}"):
            return self.styles[StyleCategory.OBJECT](delim)
        if delim in ("[", "]"):
            return self.styles[StyleCategory.ARRAY](delim)
        raise UnsupportedTokenError(f"Unknown delimiter {delim!r} encountered")

    def render_field(self, key: str) -> str:
        return self._quoted(key, StyleCategory.FIELD_QUOTE, StyleCategory.FIELD)

    def render_string(self, value: str) -> str:
        return self._quoted(value, StyleCategory.STRING_QUOTE, StyleCategory.STRING)

    def _quoted(self, text: str, quote: StyleCategory, body: StyleCategory) -> str:
        escaped = escape_string(text, self.escape_html, self.ensure_ascii)
        quote_text = self.styles[quote]('"')
        return quote_text + self.styles[body]("%s", escaped) + quote_text
