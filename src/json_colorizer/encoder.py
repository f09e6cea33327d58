"""Streaming encoder and one-shot marshal helpers."""

import io
import json
import logging
from typing import Any, Callable, Optional, TextIO

from .formatter import DEFAULT_FORMATTER, Formatter, FormatterState
from .types import ColorizeError, SerializationError

COMPACT_SEPARATORS = (",", ":")


class Encoder:
    """
    Writes colorized JSON values to a text stream.

    The encoder works on a private copy of its formatter with HTML escaping
    turned on; ``set_indent`` and ``set_escape_html`` only affect that copy.
    """

    def __init__(self, stream: TextIO, formatter: Optional[Formatter] = None, *,
                 sort_keys: bool = False,
                 default: Optional[Callable[[Any], Any]] = None,
                 logger: Optional[logging.Logger] = None):
        """
        Initialize the encoder.

        Args:
            stream: Writable text stream
            formatter: Formatter configuration (defaults to DEFAULT_FORMATTER)
            sort_keys: Serialize dictionaries with sorted keys
            default: Fallback serializer for unsupported objects, as in json.dumps
            logger: Optional logger instance
        """
        if formatter is None:
            formatter = DEFAULT_FORMATTER
        self.stream = stream
        self.formatter = formatter.with_escape_html(True)
        self.sort_keys = sort_keys
        self.default = default
        self.logger = logger or logging.getLogger(__name__)

    def set_indent(self, prefix: str, indent: str) -> None:
        """Set the line prefix and per-level indent; both empty means compact."""
        self.formatter = self.formatter.with_indent(prefix, indent)

    def set_escape_html(self, on: bool) -> None:
        """Choose whether ``<``, ``>`` and ``&`` are escaped inside strings."""
        self.formatter = self.formatter.with_escape_html(on)

    def serialize(self, value: Any) -> str:
        """
        Serialize a value to compact plain JSON.

        Raises:
            SerializationError: If the value is not JSON serializable
        """
        try:
            return json.dumps(
                value,
                ensure_ascii=False,
                separators=COMPACT_SEPARATORS,
                allow_nan=False,
                sort_keys=self.sort_keys,
                default=self.default,
            )
        except (TypeError, ValueError, RecursionError) as e:
            raise SerializationError(
                f"Failed to marshal input to standard JSON: {e}",
                context={"value_type": type(value).__name__},
            ) from e

    def encode(self, value: Any, terminate_with_newline: bool = True) -> None:
        """
        Write the colorized JSON encoding of a value.

        Args:
            value: Value to encode
            terminate_with_newline: Append a newline after the value

        Raises:
            ColorizeError: If serialization, formatting or writing fails
        """
        try:
            plain = self.serialize(value)
            FormatterState(self.formatter, self.stream, self.logger).format(
                plain, terminate_with_newline
            )
        except ColorizeError as e:
            self.logger.error(f"Encoding failed ({e.error_type.value}): {e}")
            raise


def new_encoder(stream: TextIO, formatter: Optional[Formatter] = None) -> Encoder:
    """Create an Encoder writing to ``stream``."""
    return Encoder(stream, formatter)


def marshal(value: Any) -> str:
    """Colorize ``value`` with the default formatter, without indentation."""
    return marshal_indent(value, "", "")


def marshal_indent(value: Any, prefix: str, indent: str) -> str:
    """Colorize ``value`` with the default formatter and the given indentation."""
    return marshal_indent_with_formatter(value, prefix, indent, DEFAULT_FORMATTER)


def marshal_with_formatter(value: Any, formatter: Formatter) -> str:
    """
    Colorize ``value`` with a custom formatter, without indentation.

    The formatter's ``prefix`` and ``indent`` are ignored and HTML escaping is
    always on.
    """
    return marshal_indent_with_formatter(value, "", "", formatter)


def marshal_indent_with_formatter(value: Any, prefix: str, indent: str,
                                  formatter: Formatter) -> str:
    """
    Colorize ``value`` with a custom formatter and the given indentation.

    The explicit ``prefix`` and ``indent`` replace the formatter's own and
    HTML escaping is always on, matching the plain json helpers. Use an
    Encoder to turn HTML escaping off. No trailing newline is added.

    Args:
        value: Value to colorize
        prefix: Line prefix
        indent: Per-level indent
        formatter: Formatter configuration

    Returns:
        Colorized JSON text
    """
    if formatter is None:
        raise ValueError("Cannot marshal with a None formatter")

    buffer = io.StringIO()
    encoder = Encoder(buffer, formatter)
    encoder.set_indent(prefix, indent)
    encoder.set_escape_html(True)
    encoder.encode(value, terminate_with_newline=False)
    return buffer.getvalue()
