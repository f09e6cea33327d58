"""
JSON Colorizer - colorized, optionally indented JSON for terminals.

Re-renders valid JSON token by token with per-token decorations while
keeping the layout of the standard json module.
"""

from .encoder import (
    Encoder,
    marshal,
    marshal_indent,
    marshal_indent_with_formatter,
    marshal_with_formatter,
    new_encoder,
)
from .formatter import DEFAULT_FORMATTER, DEFAULT_INDENT, DEFAULT_PREFIX, Formatter
from .styles import DEFAULT_STYLES, NO_STYLE, Style
from .types import (
    ColorizeError,
    DecodingError,
    EncodingError,
    ErrorType,
    SerializationError,
    StyleCategory,
    UnsupportedTokenError,
    WriteError,
)

__version__ = "1.0.0"
__all__ = [
    "Encoder",
    "Formatter",
    "Style",
    "StyleCategory",
    "DEFAULT_FORMATTER",
    "DEFAULT_INDENT",
    "DEFAULT_PREFIX",
    "DEFAULT_STYLES",
    "NO_STYLE",
    "marshal",
    "marshal_indent",
    "marshal_with_formatter",
    "marshal_indent_with_formatter",
    "new_encoder",
    "ColorizeError",
    "SerializationError",
    "DecodingError",
    "EncodingError",
    "UnsupportedTokenError",
    "WriteError",
    "ErrorType",
]
