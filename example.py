#!/usr/bin/env python3
"""
Example usage of the JSON Colorizer.

This script prints the same document compact, indented, with a custom
style set and through a streaming encoder.
"""

import logging
import sys

from json_colorizer import (
    DEFAULT_INDENT,
    Encoder,
    Formatter,
    Style,
    marshal,
    marshal_indent,
    marshal_indent_with_formatter,
)


def main():
    """Main example function."""
    logging.basicConfig(level=logging.INFO)

    print("JSON Colorizer Example")
    print("=" * 50)

    sample_data = {
        "users": {
            "user_001": {
                "name": "Alice Johnson",
                "email": "alice@example.com",
                "interests": ["reading", "hiking"],
                "active": True
            },
            "user_002": {
                "name": "Bob Smith",
                "email": "bob@example.com",
                "interests": [],
                "active": False
            }
        },
        "settings": {
            "theme": "dark",
            "limit": 1.5e3,
            "banner": "<b>Welcome</b>",
            "expires": None
        }
    }

    print("\nCompact:")
    print(marshal(sample_data))

    print("\nIndented:")
    print(marshal_indent(sample_data, "", DEFAULT_INDENT))

    print("\nCustom styles:")
    custom = Formatter(
        field_color=Style("magenta"),
        field_quote_color=Style("magenta"),
        number_color=Style("cyan", attrs=("bold",)),
        true_color=Style("green"),
        false_color=Style("red"),
        null_color=Style("yellow"),
    )
    print(marshal_indent_with_formatter(sample_data, "| ", "    ", custom))

    print("\nStreaming encoder without HTML escaping:")
    encoder = Encoder(sys.stdout, custom)
    encoder.set_indent("", DEFAULT_INDENT)
    encoder.set_escape_html(False)
    for user_id, user in sample_data["users"].items():
        encoder.encode({"id": user_id, **user})


if __name__ == "__main__":
    main()
