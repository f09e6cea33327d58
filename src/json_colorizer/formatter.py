"""Formatter configuration and the token-driven format state machine."""

import io
import logging
from dataclasses import dataclass, replace
from typing import Any, Optional, TextIO, Union

from .frames import NestingStack
from .renderer import TokenRenderer
from .styles import resolve_styles
from .tokens import TokenStream
from .types import StyleCategory, Token, WriteError

DEFAULT_PREFIX = ""
DEFAULT_INDENT = "  "

JSONInput = Union[bytes, bytearray, str]


@dataclass(frozen=True)
class Formatter:
    """
    Configuration for colorizing and indenting JSON.

    Every ``*_color`` field accepts a ``Style``, any object with a
    ``sprintf_func()`` method, or a callable ``(template, *args) -> str``.
    Unset fields fall back to the default styles. Instances are immutable;
    ``with_indent`` and ``with_escape_html`` return modified copies, so one
    formatter can be shared by concurrent format calls.

    Output is compact when both ``prefix`` and ``indent`` are empty.
    """
    space_color: Any = None
    comma_color: Any = None
    colon_color: Any = None
    object_color: Any = None
    array_color: Any = None
    field_quote_color: Any = None
    field_color: Any = None
    string_quote_color: Any = None
    string_color: Any = None
    true_color: Any = None
    false_color: Any = None
    number_color: Any = None
    null_color: Any = None

    prefix: str = ""
    indent: str = ""
    escape_html: bool = False
    ensure_ascii: bool = False

    @property
    def compact(self) -> bool:
        return not self.prefix and not self.indent

    def with_indent(self, prefix: str, indent: str) -> "Formatter":
        return replace(self, prefix=prefix, indent=indent)

    def with_escape_html(self, on: bool) -> "Formatter":
        return replace(self, escape_html=on)

    def format(self, dst: TextIO, src: JSONInput) -> None:
        """
        Write a colorized version of valid JSON to a text stream.

        No trailing newline is added.

        Args:
            dst: Writable text stream
            src: Raw JSON input

        Raises:
            DecodingError: If ``src`` is not valid JSON
            WriteError: If writing to ``dst`` fails
        """
        FormatterState(self, dst).format(src, False)

    def render(self, src: JSONInput, terminate_with_newline: bool = False) -> str:
        """
        Colorize valid JSON and return the result.

        Args:
            src: Raw JSON input
            terminate_with_newline: Append a final newline

        Returns:
            Decorated text
        """
        buffer = io.StringIO()
        FormatterState(self, buffer).format(src, terminate_with_newline)
        return buffer.getvalue()


DEFAULT_FORMATTER = Formatter()


class FormatterState:
    """
    State of a single format call.

    Owns the nesting stack and the indentation cache; both are discarded
    once the call returns.
    """

    def __init__(self, formatter: Formatter, dst: TextIO,
                 logger: Optional[logging.Logger] = None):
        """
        Initialize the format state.

        Args:
            formatter: Formatter configuration
            dst: Writable text stream
            logger: Optional logger instance
        """
        self.formatter = formatter
        self.dst = dst
        self.logger = logger or logging.getLogger(__name__)
        self.compact = formatter.compact
        self.styles = resolve_styles(formatter)
        self.renderer = TokenRenderer(
            self.styles,
            escape_html=formatter.escape_html,
            ensure_ascii=formatter.ensure_ascii,
        )
        self.frames = NestingStack()
        self._indent_cache = ""

        self._sprintf_space = self.styles[StyleCategory.SPACE]
        self._sprintf_comma = self.styles[StyleCategory.COMMA]
        self._sprintf_colon = self.styles[StyleCategory.COLON]

    def write(self, text: str) -> None:
        if not text:
            return
        try:
            self.dst.write(text)
        except (OSError, ValueError) as e:
            raise WriteError(f"Failed to write formatted output: {e}") from e

    def print_space(self, text: str, force: bool = False) -> None:
        """Write whitespace; skipped in compact mode unless forced."""
        if self.compact and not force:
            return
        self.write(self._sprintf_space(text))

    def print_comma(self) -> None:
        self.write(self._sprintf_comma(","))

    def print_colon(self) -> None:
        self.write(self._sprintf_colon(":"))

    def print_indent(self) -> None:
        """Write the line prefix and the indentation of the current depth."""
        if self.compact:
            return
        self.write(self.formatter.prefix)

        depth = self.frames.current.depth
        if depth > 0 and self.formatter.indent:
            size = len(self.formatter.indent) * depth
            if len(self._indent_cache) < size:
                self._indent_cache = self.formatter.indent * depth
            self.write(self._sprintf_space(self._indent_cache[:size]))

    def format(self, src: JSONInput, terminate_with_newline: bool) -> None:
        """
        Tokenize ``src`` and write the decorated output.

        Args:
            src: Raw JSON input
            terminate_with_newline: Append a final newline, even when compact

        Raises:
            DecodingError: If ``src`` is not valid JSON
            EncodingError: If a string cannot be escaped
            UnsupportedTokenError: If an unknown token kind shows up
            WriteError: If writing to the output fails
        """
        stream = TokenStream(src)
        self.logger.debug(f"Formatting {len(stream.doc)} characters of JSON "
                          f"(compact={self.compact})")

        count = 0
        while True:
            token = stream.token()
            if token is None:
                break
            count += 1

            # Whether a sibling follows is decided before the next token is read
            has_more = stream.more()

            if token.is_opening:
                self._open(token, has_more)
            elif token.is_closing:
                self._close(token, has_more)
            else:
                self._scalar(token, has_more)

        if terminate_with_newline:
            self.print_space("\n", force=True)

        self.logger.debug(f"Formatted {count} tokens")

    def _open(self, token: Token, has_more: bool) -> None:
        frame = self.frames.current
        # Inside an object an opening delimiter always follows a colon
        if not frame.in_object:
            self.print_indent()

        self.write(self.renderer.render(token, frame))
        if has_more:
            self.print_space("\n")
        self.frames.push(is_object=token.value == "{", starts_empty=not has_more)

    def _close(self, token: Token, has_more: bool) -> None:
        closing_empty = self.frames.current.is_empty
        parent = self.frames.pop()

        if not closing_empty:
            self.print_indent()
        self.write(self.renderer.render(token, parent))

        if parent.in_array_or_object and has_more:
            self.print_comma()
        if self.frames.nested:
            self.print_space("\n")

        if parent.in_object:
            self.frames.toggle_expecting_value()

    def _scalar(self, token: Token, has_more: bool) -> None:
        frame = self.frames.current
        is_key = frame.is_key_position

        if not frame.in_field:
            self.print_indent()

        self.write(self.renderer.render(token, frame))

        if is_key:
            self.print_colon()
            self.print_space(" ")
        else:
            if frame.in_array_or_object and has_more:
                self.print_comma()
            if self.frames.nested:
                self.print_space("\n")

        if frame.in_object:
            self.frames.toggle_expecting_value()
