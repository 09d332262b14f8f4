"""A value wrapper that ignores updates older than ones already applied."""

from __future__ import annotations

from typing import Generic, TypeVar

T = TypeVar("T")

GENERATION_MAX = (1 << 128) - 1


class Ordered(Generic[T]):
    """Holds a value, a dirty flag and the lowest generation still accepted."""

    __slots__ = ("_value", "_min_gen", "_dirty")

    def __init__(self, value: T) -> None:
        self._value = value
        self._min_gen = 0
        self._dirty = False

    @property
    def value(self) -> T:
        """The contained value."""
        return self._value

    @property
    def min_gen(self) -> int:
        """The lowest generation that :meth:`set` will still apply."""
        return self._min_gen

    @property
    def is_dirty(self) -> bool:
        """Whether the container is marked as dirty."""
        return self._dirty

    def set(self, value: T, generation: int) -> None:
        """Apply ``value`` if ``generation`` is not older than the last applied one.

        An applied update marks the container dirty when the value changes,
        and raises the accepted minimum to ``generation + 1``.
        """
        if not 0 <= generation <= GENERATION_MAX:
            raise ValueError(f"generation out of range: {generation}")
        if generation >= self._min_gen:
            if generation == GENERATION_MAX:
                raise OverflowError("generation counter overflow")
            if self._value != value:
                self.mark_dirty()
            self.set_silent(value)
            self._min_gen = generation + 1

    def set_nogen(self, value: T) -> None:
        """Replace the value regardless of generation, marking dirty if it differs."""
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
        return (
            f"{type(self).__name__}({self._value!r}, "
            f"min_gen={self._min_gen}, dirty={self._dirty})"
        )