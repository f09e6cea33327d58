"""Tests for the nesting stack."""

import pytest

from json_colorizer.frames import Frame, NestingStack


class TestFrame:
    """Tests for Frame predicates."""

    def test_root_frame_predicates(self):
        """Test that the root frame answers False everywhere."""
        root = Frame()

        assert root.is_root
        assert root.depth == 0
        assert not root.in_object
        assert not root.in_array
        assert not root.in_array_or_object
        assert not root.in_field
        assert not root.is_key_position
        assert not root.is_empty

    def test_root_empty_flag_is_ignored(self):
        """Test that emptiness only applies to containers."""
        assert not Frame(empty=True).is_empty

    def test_object_key_and_value_positions(self):
        """Test key/value predicates of an object frame."""
        frame = Frame(is_object=True, depth=1)

        assert frame.is_key_position
        assert not frame.in_field

        frame.expecting_value = True

        assert frame.in_field
        assert not frame.is_key_position

    def test_array_has_no_key_position(self):
        """Test that arrays never expect keys."""
        frame = Frame(is_array=True, depth=1, expecting_value=True)

        assert not frame.is_key_position
        assert not frame.in_field


class TestNestingStack:
    """Tests for NestingStack class."""

    def setup_method(self):
        """Set up test fixtures."""
        self.stack = NestingStack()

    def test_starts_with_root(self):
        """Test the initial state."""
        assert len(self.stack) == 1
        assert self.stack.current.is_root
        assert not self.stack.nested

    def test_push_increments_depth(self):
        """Test depth of pushed frames."""
        outer = self.stack.push(is_object=True, starts_empty=False)
        inner = self.stack.push(is_object=False, starts_empty=True)

        assert outer.depth == 1 and outer.is_object and not outer.is_array
        assert inner.depth == 2 and inner.is_array and not inner.is_object
        assert inner.is_empty
        assert self.stack.current is inner
        assert self.stack.nested

    def test_pop_returns_parent(self):
        """Test that popping exposes the parent frame."""
        outer = self.stack.push(is_object=True, starts_empty=False)
        self.stack.push(is_object=False, starts_empty=False)

        parent = self.stack.pop()

        assert parent is outer
        assert self.stack.current is outer

    def test_root_is_never_popped(self):
        """Test that popping the root fails."""
        with pytest.raises(RuntimeError):
            self.stack.pop()

    def test_toggle_expecting_value(self):
        """Test key/value alternation on an object."""
        frame = self.stack.push(is_object=True, starts_empty=False)

        self.stack.toggle_expecting_value()
        assert frame.expecting_value

        self.stack.toggle_expecting_value()
        assert not frame.expecting_value

    def test_toggle_outside_object(self):
        """Test that alternation is rejected for arrays and the root."""
        with pytest.raises(RuntimeError):
            self.stack.toggle_expecting_value()

        self.stack.push(is_object=False, starts_empty=False)
        with pytest.raises(RuntimeError):
            self.stack.toggle_expecting_value()
