"""A value wrapper that remembers whether it has changed."""

from __future__ import annotations

import copy
from contextlib import contextmanager
from typing import Generic, Iterator, TypeVar

T = TypeVar("T")

_UNSET = object()


class DirtyMut(Generic[T]):
    """Scoped handle for changing the value held by a :class:`Dirty`.

    The original value is snapshotted the first time it is written or
    borrowed for mutation. When the scope ends, the container is marked
    dirty if the value no longer equals that snapshot.
    """

    __slots__ = ("_container", "_original")

    def __init__(self, container: Dirty[T]) -> None:
        self._container = container
        self._original: object = _UNSET

    def _snapshot(self) -> None:
        if self._original is _UNSET:
            self._original = copy.deepcopy(self._container._value)

    @property
    def value(self) -> T:
        """The contained value, for reading."""
        return self._container._value

    @value.setter
    def value(self, new: T) -> None:
        self._snapshot()
        self._container._value = new

    def borrow(self) -> T:
        """Return the contained value for in-place mutation."""
        self._snapshot()
        return self._container._value

    def _finish(self) -> None:
        if self._original is not _UNSET and self._original != self._container._value:
            self._container.mark_dirty()


class Dirty(Generic[T]):
    """Holds a value together with a flag saying whether it changed."""

    __slots__ = ("_value", "_dirty")

    def __init__(self, value: T, dirty: bool = False) -> None:
        self._value = value
        self._dirty = bool(dirty)

    @classmethod
    def new_clean(cls, value: T) -> Dirty[T]:
        """Create a container not marked as dirty."""
        return cls(value, False)

    @classmethod
    def new_dirty(cls, value: T) -> Dirty[T]:
        """Create a container already marked as dirty."""
        return cls(value, True)

    @property
    def value(self) -> T:
        """The contained value."""
        return self._value

    @property
    def is_dirty(self) -> bool:
        """Whether the container is marked as dirty."""
        return self._dirty

    def set(self, value: T) -> None:
        """Replace the value, marking dirty only if it differs from the old one."""
        if self._value != value:
            self.mark_dirty()
        self.set_silent(value)

    def set_dirty(self, value: T) -> None:
        """Replace the value and mark dirty unconditionally."""
        self.set_silent(value)
        self.mark_dirty()

    def set_silent(self, value: T) -> None:
        """Replace the value, leaving the dirty flag unchanged."""
        self._value = value

    @contextmanager
    def modify(self) -> Iterator[DirtyMut[T]]:
        """Open a scope in which the value may be changed.

        On leaving the scope the container is marked dirty if the value
        was written or borrowed and now differs from what it was.
        """
        handle = DirtyMut(self)
        try:
            yield handle
        finally:
            handle._finish()

    def mark_dirty(self) -> None:
        """Mark as dirty without changing the value."""
        self._dirty = True

    def mark_clean(self) -> None:
        """Clear the dirty mark without changing the value."""
        self._dirty = False

    def mark(self, dirty: bool) -> None:
        """Set the dirty mark without changing the value."""
        self._dirty = bool(dirty)

    def take_dirty(self) -> bool:
        """Return whether the container was dirty, and clear the mark."""
        was_dirty = self._dirty
        self._dirty = False
        return was_dirty

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._value!r}, dirty={self._dirty})"