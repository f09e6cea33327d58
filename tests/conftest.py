"""Pytest configuration and fixtures."""

import re

import pytest

from json_colorizer import NO_STYLE, Formatter, StyleCategory

ANSI_ESCAPE = re.compile(r"\x1b\[[0-9;]*m")


def strip_ansi(text: str) -> str:
    """Remove terminal escape sequences."""
    return ANSI_ESCAPE.sub("", text)


def tag(name: str):
    """Decoration that wraps its output in <name>...</name> markers."""
    def sprintf(template, *args):
        text = template % args if args else template
        return f"<{name}>{text}</{name}>"
    return sprintf


def color_fields(factory):
    """Build Formatter keyword arguments for every style category."""
    return {
        f"{category.value}_color": factory(category)
        for category in StyleCategory
    }


@pytest.fixture
def plain_formatter():
    """Formatter whose decorations are all the identity."""
    return Formatter(**color_fields(lambda category: NO_STYLE))


@pytest.fixture
def tagged_formatter():
    """Formatter that marks every decorated fragment with its category."""
    return Formatter(**color_fields(lambda category: tag(category.value)))


@pytest.fixture
def sample_dict_json():
    """Sample nested dictionary for testing."""
    return {
        "users": {
            "user1": {
                "name": "Alice",
                "email": "alice@example.com",
                "profile": {
                    "age": 30,
                    "city": "New York"
                }
            },
            "user2": {
                "name": "Bob",
                "email": "bob@example.com",
                "profile": {
                    "age": 25,
                    "city": "San Francisco"
                }
            }
        },
        "settings": {
            "theme": "dark",
            "notifications": True
        }
    }


@pytest.fixture
def sample_list_json():
    """Sample list for testing."""
    return [
        {"id": 1, "name": "Item 1", "value": 100},
        {"id": 2, "name": "Item 2", "value": 200},
        {"id": 3, "name": "Item 3", "value": 300},
    ]


@pytest.fixture
def sample_mixed_json():
    """Sample mixed structure with every value kind."""
    return {
        "metadata": {
            "version": "1.0",
            "created": "2024-01-01",
            "tags": [],
            "extra": {}
        },
        "data": [
            {"type": "A", "values": [1, 2.5, -3e-07]},
            {"type": "B", "values": [[], [[]], {}]},
        ],
        "config": {
            "enabled": True,
            "disabled": False,
            "missing": None,
            "path": "C:\\temp\n\t\"quoted\"",
            "unicode": "caf\u00e9 \u2603"
        }
    }
