"""Decoration styles and their resolution against a formatter."""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Callable, Dict, Mapping, Optional, Tuple

import termcolor

from .types import StyleCategory

SprintfFunc = Callable[..., str]


def _apply_template(template: str, args: Tuple[Any, ...]) -> str:
    if args:
        return template % args
    return template


@dataclass(frozen=True)
class Style:
    """
    Immutable terminal style backed by termcolor.

    A style without color, background or attributes is the identity
    decoration and never emits escape codes.

    Args:
        color: termcolor foreground color name
        on_color: termcolor background color name
        attrs: termcolor attribute names such as "bold"
        no_color: passed through to termcolor to disable colors
        force_color: passed through to termcolor to force colors
    """
    color: Optional[str] = None
    on_color: Optional[str] = None
    attrs: Tuple[str, ...] = ()
    no_color: Optional[bool] = None
    force_color: Optional[bool] = None

    @property
    def is_plain(self) -> bool:
        return self.color is None and self.on_color is None and not self.attrs

    def sprintf_func(self) -> SprintfFunc:
        """
        Build a function that formats a template and wraps it in this style.

        Returns:
            Callable taking ``(template, *args)`` and returning decorated text
        """
        if self.is_plain:
            return lambda template, *args: _apply_template(template, args)

        attrs = list(self.attrs) or None

        def sprintf(template: str, *args: Any) -> str:
            return termcolor.colored(
                _apply_template(template, args),
                self.color,
                self.on_color,
                attrs,
                no_color=self.no_color,
                force_color=self.force_color,
            )

        return sprintf


NO_STYLE = Style()

DEFAULT_SPACE_STYLE = Style()
DEFAULT_COMMA_STYLE = Style(attrs=("bold",))
DEFAULT_COLON_STYLE = Style(attrs=("bold",))
DEFAULT_OBJECT_STYLE = Style(attrs=("bold",))
DEFAULT_ARRAY_STYLE = Style(attrs=("bold",))
DEFAULT_FIELD_QUOTE_STYLE = Style("blue", attrs=("bold",))
DEFAULT_FIELD_STYLE = Style("blue", attrs=("bold",))
DEFAULT_STRING_QUOTE_STYLE = Style("green")
DEFAULT_STRING_STYLE = Style("green")
DEFAULT_TRUE_STYLE = Style()
DEFAULT_FALSE_STYLE = Style()
DEFAULT_NUMBER_STYLE = Style()
DEFAULT_NULL_STYLE = Style("black", attrs=("bold",))

DEFAULT_STYLES: Mapping[StyleCategory, Style] = MappingProxyType({
    StyleCategory.SPACE: DEFAULT_SPACE_STYLE,
    StyleCategory.COMMA: DEFAULT_COMMA_STYLE,
    StyleCategory.COLON: DEFAULT_COLON_STYLE,
    StyleCategory.OBJECT: DEFAULT_OBJECT_STYLE,
    StyleCategory.ARRAY: DEFAULT_ARRAY_STYLE,
    StyleCategory.FIELD_QUOTE: DEFAULT_FIELD_QUOTE_STYLE,
    StyleCategory.FIELD: DEFAULT_FIELD_STYLE,
    StyleCategory.STRING_QUOTE: DEFAULT_STRING_QUOTE_STYLE,
    StyleCategory.STRING: DEFAULT_STRING_STYLE,
    StyleCategory.TRUE: DEFAULT_TRUE_STYLE,
    StyleCategory.FALSE: DEFAULT_FALSE_STYLE,
    StyleCategory.NUMBER: DEFAULT_NUMBER_STYLE,
    StyleCategory.NULL: DEFAULT_NULL_STYLE,
})


def to_sprintf_func(decoration: Any) -> SprintfFunc:
    """
    Convert a decoration into a sprintf-style function.

    Args:
        decoration: Object with a ``sprintf_func()`` method, or a callable
            taking ``(template, *args)``

    Returns:
        Sprintf-style decoration function

    Raises:
        TypeError: If the decoration is neither
    """
    factory = getattr(decoration, "sprintf_func", None)
    if callable(factory):
        return factory()
    if callable(decoration):
        return decoration
    raise TypeError(f"Unsupported decoration type: {type(decoration).__name__}")


class ResolvedStyles:
    """Decoration functions for every category, resolved once per format call."""

    def __init__(self, funcs: Dict[StyleCategory, SprintfFunc]):
        self._funcs = dict(funcs)

    def get(self, category: StyleCategory) -> SprintfFunc:
        return self._funcs[category]

    def __getitem__(self, category: StyleCategory) -> SprintfFunc:
        return self._funcs[category]


def resolve_style(category: StyleCategory, override: Any = None) -> SprintfFunc:
    """Resolve one category, falling back to its default style."""
    if override is None:
        override = DEFAULT_STYLES[category]
    return to_sprintf_func(override)


def resolve_styles(formatter: Any) -> ResolvedStyles:
    """
    Resolve all categories for a formatter.

    Reads the ``<category>_color`` attribute of the formatter for each
    category and falls back to the defaults where it is unset.

    Args:
        formatter: Formatter configuration

    Returns:
        ResolvedStyles for the whole category set
    """
    return ResolvedStyles({
        category: resolve_style(
            category, getattr(formatter, f"{category.value}_color", None)
        )
        for category in StyleCategory
    })
