"""Nesting state for the format driver."""

from dataclasses import dataclass
from typing import List


@dataclass
class Frame:
    """
    State of one open container.

    The root frame is neither an object nor an array and sits at depth 0.
    All predicates answer False for it, so top level behaves like a
    container-less context.
    """
    is_object: bool = False
    is_array: bool = False
    expecting_value: bool = False
    empty: bool = False
    depth: int = 0

    @property
    def is_root(self) -> bool:
        return not (self.is_object or self.is_array)

    @property
    def in_object(self) -> bool:
        return self.is_object

    @property
    def in_array(self) -> bool:
        return self.is_array

    @property
    def in_array_or_object(self) -> bool:
        return self.is_object or self.is_array

    @property
    def in_field(self) -> bool:
        """True when inside an object and the next token is a value."""
        return self.is_object and self.expecting_value

    @property
    def is_key_position(self) -> bool:
        """True when inside an object and the next token is a key."""
        return self.is_object and not self.expecting_value

    @property
    def is_empty(self) -> bool:
        return self.in_array_or_object and self.empty


class NestingStack:
    """Stack of open containers. The root frame is never popped."""

    def __init__(self):
        self._frames: List[Frame] = [Frame()]

    def __len__(self) -> int:
        return len(self._frames)

    @property
    def current(self) -> Frame:
        return self._frames[-1]

    @property
    def nested(self) -> bool:
        """True while at least one container is open."""
        return len(self._frames) > 1

    def push(self, is_object: bool, starts_empty: bool) -> Frame:
        """
        Open a container one level deeper than the current frame.

        Args:
            is_object: True for an object, False for an array
            starts_empty: True if no token follows the opening delimiter

        Returns:
            The new current frame
        """
        frame = Frame(
            is_object=is_object,
            is_array=not is_object,
            empty=starts_empty,
            depth=self.current.depth + 1,
        )
        self._frames.append(frame)
        return frame

    def pop(self) -> Frame:
        """
        Close the current container.

        Returns:
            The parent frame, which becomes current

        Raises:
            RuntimeError: If only the root frame is left
        """
        if not self.nested:
            raise RuntimeError("Cannot pop the root frame")
        self._frames.pop()
        return self.current

    def toggle_expecting_value(self) -> None:
        """Switch the current object between expecting a key and a value."""
        frame = self.current
        if not frame.is_object:
            raise RuntimeError("Key/value alternation only applies to objects")
        frame.expecting_value = not frame.expecting_value
