"""JSON string escaping."""

import json

from .types import EncodingError

HTML_CHARS = ("&", "<", ">")


def escape_html_chars(text: str) -> str:
    """Replace ``&``, ``<`` and ``>`` with their ``\\u00XX`` escapes."""
    for char in HTML_CHARS:
        text = text.replace(char, "\\u%04x" % ord(char))
    return text


def escape_string(raw: str, escape_html: bool = False, ensure_ascii: bool = False) -> str:
    """
    Escape a string the way the json module does, without the quotes.

    Args:
        raw: Decoded string value
        escape_html: Also escape ``<``, ``>`` and ``&``
        ensure_ascii: Escape every non-ASCII character

    Returns:
        Escaped string content

    Raises:
        EncodingError: If the string cannot be encoded
    """
    try:
        encoded = json.dumps(raw, ensure_ascii=ensure_ascii)
    except (TypeError, ValueError) as e:
        raise EncodingError(f"Internal error encoding string segment: {e}") from e

    if len(encoded) < 2 or encoded[0] != '"' or encoded[-1] != '"':
        raise EncodingError(
            "Internal error encoding string segment: result is not a quoted string",
            context={"encoded": encoded},
        )

    content = encoded[1:-1]
    if escape_html:
        content = escape_html_chars(content)
    return content
