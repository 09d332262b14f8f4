"""Fixed-width integer kinds and a post-increment counter that wraps."""

from __future__ import annotations

import enum


class IntKind(enum.Enum):
    """A fixed-width integer type, described by its bit width and signedness."""

    U8 = (8, False)
    I8 = (8, True)
    U16 = (16, False)
    I16 = (16, True)
    U32 = (32, False)
    I32 = (32, True)
    U64 = (64, False)
    I64 = (64, True)
    U128 = (128, False)
    I128 = (128, True)
    USIZE = (64, False, "size")
    ISIZE = (64, True, "size")

    @property
    def bits(self) -> int:
        return self.value[0]

    @property
    def signed(self) -> bool:
        return self.value[1]

    @property
    def min(self) -> int:
        return -(1 << (self.bits - 1)) if self.signed else 0

    @property
    def max(self) -> int:
        return (1 << (self.bits - 1)) - 1 if self.signed else (1 << self.bits) - 1

    def contains(self, value: int) -> bool:
        """Whether ``value`` is representable in this kind."""
        return self.min <= value <= self.max

    def wrap(self, value: int) -> int:
        """Reduce ``value`` into this kind's range with two's-complement wrapping."""
        modulus = 1 << self.bits
        wrapped = value % modulus
        if self.signed and wrapped > self.max:
            wrapped -= modulus
        return wrapped


def wrapping_add(value: int, amount: int, kind: IntKind) -> int:
    """Add ``amount`` to ``value``, wrapping around at the bounds of ``kind``."""
    return kind.wrap(value + amount)


class Counter:
    """An integer of a fixed kind that increments with wrapping."""

    __slots__ = ("_value", "_kind")

    def __init__(self, value: int = 0, kind: IntKind = IntKind.I32) -> None:
        if not kind.contains(value):
            raise ValueError(f"{value} is out of range for {kind.name}")
        self._value = value
        self._kind = kind

    @property
    def value(self) -> int:
        return self._value

    @property
    def kind(self) -> IntKind:
        return self._kind

    def increment(self) -> int:
        """Increment the counter, returning the old value."""
        old = self._value
        self._value = wrapping_add(old, 1, self._kind)
        return old

    def __int__(self) -> int:
        return self._value

    def __index__(self) -> int:
        return self._value

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._value}, IntKind.{self._kind.name})"