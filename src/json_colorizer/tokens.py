"""Token stream over raw JSON input."""

import json
from enum import Enum
from json.decoder import scanstring
from json.scanner import NUMBER_RE
from typing import List, Optional, Union

from .types import DecodingError, Token, TokenKind

WHITESPACE = " \t\n\r"

LITERALS = (
    ("true", Token(TokenKind.BOOL, True)),
    ("false", Token(TokenKind.BOOL, False)),
    ("null", Token(TokenKind.NULL, None)),
)


class _Expect(Enum):
    """What the grammar allows at the current position."""
    TOP_VALUE = "top value"
    ARRAY_START = "array value or end"
    ARRAY_VALUE = "comma or end of array"
    ARRAY_COMMA = "array value"
    OBJECT_START = "object key or end"
    OBJECT_KEY = "colon after object key"
    OBJECT_COLON = "object value"
    OBJECT_VALUE = "comma or end of object"
    OBJECT_COMMA = "object key"


VALUE_POSITIONS = (
    _Expect.TOP_VALUE,
    _Expect.ARRAY_START,
    _Expect.ARRAY_COMMA,
    _Expect.OBJECT_COLON,
)


def decode_source(src: Union[bytes, bytearray, str]) -> str:
    """
    Turn raw JSON input into text.

    Bytes are decoded with the encoding detection used by ``json.loads``.

    Raises:
        DecodingError: If the bytes are not valid in the detected encoding
    """
    if isinstance(src, str):
        return src
    if not isinstance(src, (bytes, bytearray)):
        raise TypeError(f"JSON input must be str, bytes or bytearray, not {type(src).__name__}")

    encoding = json.detect_encoding(src)
    try:
        return src.decode(encoding, "surrogatepass")
    except UnicodeDecodeError as e:
        raise DecodingError(f"Invalid {encoding} input", pos=e.start) from e


class TokenStream:
    """
    Sequential JSON tokenizer with one element of lookahead.

    Commas and colons are consumed internally and checked against the JSON
    grammar, so callers only see delimiters and scalar values. Several
    whitespace-separated top-level values are read as a stream.
    """

    def __init__(self, src: Union[bytes, bytearray, str]):
        self.doc = decode_source(src)
        self.pos = 0
        self.containers: List[str] = []
        self.expect = _Expect.TOP_VALUE

    def _error(self, message: str, pos: Optional[int] = None) -> DecodingError:
        return DecodingError(message, self.doc, self.pos if pos is None else pos)

    def _peek(self) -> str:
        """Skip whitespace and return the next character, or "" at the end."""
        doc = self.doc
        pos = self.pos
        while pos < len(doc) and doc[pos] in WHITESPACE:
            pos += 1
        self.pos = pos
        return doc[pos] if pos < len(doc) else ""

    def more(self) -> bool:
        """Report whether another element follows in the current container."""
        char = self._peek()
        return char != "" and char not in "]}"

    def token(self) -> Optional[Token]:
        """
        Read the next token.

        Returns:
            Next Token, or None once the input is exhausted

        Raises:
            DecodingError: If the input is not valid JSON
        """
        while True:
            char = self._peek()

            if char == "":
                if self.containers or self.expect is not _Expect.TOP_VALUE:
                    raise self._error("Unexpected end of JSON input")
                return None

            if char == ",":
                if self.expect is _Expect.ARRAY_VALUE:
                    self.expect = _Expect.ARRAY_COMMA
                elif self.expect is _Expect.OBJECT_VALUE:
                    self.expect = _Expect.OBJECT_COMMA
                else:
                    raise self._error(f"Unexpected ',' while expecting {self.expect.value}")
                self.pos += 1
                continue

            if char == ":":
                if self.expect is not _Expect.OBJECT_KEY:
                    raise self._error(f"Unexpected ':' while expecting {self.expect.value}")
                self.expect = _Expect.OBJECT_COLON
                self.pos += 1
                continue

            if char in "]}":
                return self._close(char)

            if self.expect in (_Expect.OBJECT_START, _Expect.OBJECT_COMMA):
                if char != '"':
                    raise self._error(f"Invalid character {char!r} looking for beginning of object key string")
                key = self._scan_string()
                self.expect = _Expect.OBJECT_KEY
                return Token(TokenKind.STRING, key)

            if self.expect not in VALUE_POSITIONS:
                raise self._error(f"Invalid character {char!r} while expecting {self.expect.value}")

            if char in "[{":
                self.containers.append(char)
                self.expect = _Expect.ARRAY_START if char == "[" else _Expect.OBJECT_START
                self.pos += 1
                return Token(TokenKind.DELIM, char)

            return self._scan_scalar(char)

    def _close(self, char: str) -> Token:
        if char == "]":
            allowed = (_Expect.ARRAY_START, _Expect.ARRAY_VALUE)
        else:
            allowed = (_Expect.OBJECT_START, _Expect.OBJECT_VALUE)
        if self.expect not in allowed:
            raise self._error(f"Unexpected {char!r} while expecting {self.expect.value}")

        self.containers.pop()
        self.pos += 1
        self._after_value()
        return Token(TokenKind.DELIM, char)

    def _after_value(self) -> None:
        if not self.containers:
            self.expect = _Expect.TOP_VALUE
        elif self.containers[-1] == "[":
            self.expect = _Expect.ARRAY_VALUE
        else:
            self.expect = _Expect.OBJECT_VALUE

    def _scan_string(self) -> str:
        try:
            value, end = scanstring(self.doc, self.pos + 1, True)
        except json.JSONDecodeError as e:
            raise DecodingError(e.msg, self.doc, e.pos) from e
        self.pos = end
        return value

    def _scan_scalar(self, char: str) -> Token:
        if char == '"':
            token = Token(TokenKind.STRING, self._scan_string())
        else:
            token = self._scan_literal() or self._scan_number()
            if token is None:
                raise self._error(f"Invalid character {char!r} looking for beginning of value")
        self._after_value()
        return token

    def _scan_literal(self) -> Optional[Token]:
        for text, token in LITERALS:
            if self.doc.startswith(text, self.pos):
                self.pos += len(text)
                return token
        return None

    def _scan_number(self) -> Optional[Token]:
        match = NUMBER_RE.match(self.doc, self.pos)
        if match is None:
            return None
        self.pos = match.end()
        return Token(TokenKind.NUMBER, match.group(0))

    def __iter__(self):
        while True:
            token = self.token()
            if token is None:
                return
            yield token
