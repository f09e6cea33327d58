"""Core type definitions for the JSON Colorizer."""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional


class StyleCategory(Enum):
    """Enumeration of the decorated output categories."""
    SPACE = "space"
    COMMA = "comma"
    COLON = "colon"
    OBJECT = "object"
    ARRAY = "array"
    FIELD_QUOTE = "field_quote"
    FIELD = "field"
    STRING_QUOTE = "string_quote"
    STRING = "string"
    TRUE = "true"
    FALSE = "false"
    NUMBER = "number"
    NULL = "null"


class TokenKind(Enum):
    """Enumeration of JSON token kinds."""
    DELIM = "delim"
    STRING = "string"
    NUMBER = "number"
    BOOL = "bool"
    NULL = "null"


class ErrorType(Enum):
    """Enumeration of error types, one per formatting phase."""
    SERIALIZATION = "serialization"
    DECODING = "decoding"
    ENCODING = "encoding"
    UNSUPPORTED_TOKEN = "unsupported_token"
    WRITE = "write"


OPENING_DELIMS = ("{", "[")
CLOSING_DELIMS = ("}", "]")


@dataclass(frozen=True)
class Token:
    """
    A single JSON token.

    ``value`` holds the delimiter character for DELIM, the decoded text for
    STRING, the literal source text for NUMBER, a ``bool`` for BOOL and
    ``None`` for NULL.
    """
    kind: TokenKind
    value: Any = None

    @property
    def is_opening(self) -> bool:
        return self.kind is TokenKind.DELIM and self.value in OPENING_DELIMS

    @property
    def is_closing(self) -> bool:
        return self.kind is TokenKind.DELIM and self.value in CLOSING_DELIMS


class ColorizeError(Exception):
    """Base exception for every failure of a colorizing operation."""

    error_type: Optional[ErrorType] = None

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.context = context or {}


class SerializationError(ColorizeError):
    """The value could not be serialized into plain JSON."""
    error_type = ErrorType.SERIALIZATION


class DecodingError(ColorizeError):
    """The JSON input is malformed."""
    error_type = ErrorType.DECODING

    def __init__(self, message: str, doc: str = "", pos: int = 0,
                 context: Optional[Dict[str, Any]] = None):
        self.msg = message
        self.pos = pos
        self.lineno = doc.count("\n", 0, pos) + 1
        self.colno = pos - doc.rfind("\n", 0, pos)
        super().__init__(
            f"{message}: line {self.lineno} column {self.colno} (char {pos})",
            context,
        )


class EncodingError(ColorizeError):
    """A string value could not be escaped."""
    error_type = ErrorType.ENCODING


class UnsupportedTokenError(ColorizeError):
    """A token outside the JSON grammar reached the renderer."""
    error_type = ErrorType.UNSUPPORTED_TOKEN


class WriteError(ColorizeError):
    """The output sink rejected a write."""
    error_type = ErrorType.WRITE
