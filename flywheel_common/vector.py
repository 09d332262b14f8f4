"""Small fixed-size vectors with element-wise arithmetic."""

from __future__ import annotations

import functools
import math
import operator
from dataclasses import dataclass
from typing import Any, Callable, ClassVar, Iterable, Iterator, Tuple, TypeVar

V = TypeVar("V", bound="_Vector")


def _binary(op: Callable[[Any, Any], Any]) -> Callable[[Any, Any], Any]:
    """Element-wise operator with a vector of the same kind or a scalar on the right."""

    def method(self: V, other: Any) -> Any:
        if isinstance(other, _Vector):
            if type(other) is not type(self):
                return NotImplemented
            return type(self)(*map(op, self, other))
        return type(self)(*(op(component, other) for component in self))

    method.__name__ = f"__{op.__name__.strip('_')}__"
    return method


def _reflected(op: Callable[[Any, Any], Any]) -> Callable[[Any, Any], Any]:
    """Element-wise operator with a scalar on the left."""

    def method(self: V, other: Any) -> Any:
        if isinstance(other, _Vector):
            return NotImplemented
        return type(self)(*(op(other, component) for component in self))

    method.__name__ = f"__r{op.__name__.strip('_')}__"
    return method


def _not(value: Any) -> Any:
    """Logical not for booleans, bitwise not for everything else."""
    if isinstance(value, bool):
        return not value
    return ~value


def _splat(cls: type[V], value: Any) -> V:
    return cls(*(value for _ in cls._FIELDS))


def _from_array(cls: type[V], values: Iterable[Any]) -> V:
    items = tuple(values)
    if len(items) != len(cls._FIELDS):
        raise ValueError(
            f"{cls.__name__} needs {len(cls._FIELDS)} values, got {len(items)}"
        )
    return cls(*items)


def _map(vector: V, func: Callable[[Any], Any]) -> V:
    return type(vector)(*(func(component) for component in vector))


def _dot(left: V, right: V) -> Any:
    if type(right) is not type(left):
        raise TypeError(
            f"cannot take dot product of {type(left).__name__} "
            f"and {type(right).__name__}"
        )
    return functools.reduce(operator.add, map(operator.mul, left, right))


class _Vector:
    """Shared behaviour of the fixed-size vector types."""

    __slots__ = ()

    _FIELDS: ClassVar[Tuple[str, ...]] = ()

    def __iter__(self) -> Iterator[Any]:
        return (getattr(self, name) for name in self._FIELDS)

    def __len__(self) -> int:
        return len(self._FIELDS)

    __add__ = _binary(operator.add)
    __radd__ = _reflected(operator.add)
    __sub__ = _binary(operator.sub)
    __rsub__ = _reflected(operator.sub)
    __mul__ = _binary(operator.mul)
    __rmul__ = _reflected(operator.mul)
    __truediv__ = _binary(operator.truediv)
    __rtruediv__ = _reflected(operator.truediv)
    __floordiv__ = _binary(operator.floordiv)
    __rfloordiv__ = _reflected(operator.floordiv)
    __mod__ = _binary(operator.mod)
    __rmod__ = _reflected(operator.mod)
    __and__ = _binary(operator.and_)
    __rand__ = _reflected(operator.and_)
    __or__ = _binary(operator.or_)
    __ror__ = _reflected(operator.or_)
    __xor__ = _binary(operator.xor)
    __rxor__ = _reflected(operator.xor)
    __lshift__ = _binary(operator.lshift)
    __rlshift__ = _reflected(operator.lshift)
    __rshift__ = _binary(operator.rshift)
    __rrshift__ = _reflected(operator.rshift)

    def __neg__(self: V) -> V:
        return _map(self, operator.neg)

    def __invert__(self: V) -> V:
        return _map(self, _not)


@dataclass(frozen=True, order=True, slots=True)
class Vec2(_Vector):
    """A two-element vector."""

    x: Any
    y: Any

    _FIELDS: ClassVar[Tuple[str, ...]] = ("x", "y")

    @classmethod
    def splat(cls, value: Any) -> "Vec2":
        """Create a vector with ``value`` in every element."""
        return _splat(cls, value)

    @classmethod
    def from_array(cls, values: Iterable[Any]) -> "Vec2":
        """Create a vector from exactly two values."""
        return _from_array(cls, values)

    def map(self, func: Callable[[Any], Any]) -> "Vec2":
        """Create a new vector by applying ``func`` to every element."""
        return _map(self, func)

    def to_array(self) -> tuple:
        """Return the elements as a tuple."""
        return tuple(self)

    def dot(self, other: "Vec2") -> Any:
        """Return the dot product of this vector and ``other``."""
        return _dot(self, other)


@dataclass(frozen=True, order=True, slots=True)
class Vec3(_Vector):
    """A three-element vector."""

    x: Any
    y: Any
    z: Any

    _FIELDS: ClassVar[Tuple[str, ...]] = ("x", "y", "z")

    @classmethod
    def splat(cls, value: Any) -> "Vec3":
        """Create a vector with ``value`` in every element."""
        return _splat(cls, value)

    @classmethod
    def from_array(cls, values: Iterable[Any]) -> "Vec3":
        """Create a vector from exactly three values."""
        return _from_array(cls, values)

    def map(self, func: Callable[[Any], Any]) -> "Vec3":
        """Create a new vector by applying ``func`` to every element."""
        return _map(self, func)

    def to_array(self) -> tuple:
        """Return the elements as a tuple."""
        return tuple(self)

    def dot(self, other: "Vec3") -> Any:
        """Return the dot product of this vector and ``other``."""
        return _dot(self, other)


for _cls in (Vec2, Vec3):
    _cls.FALSE = _cls.splat(False)
    _cls.TRUE = _cls.splat(True)
    _cls.ZERO = _cls.splat(0)
    _cls.ONE = _cls.splat(1)
    _cls.NEG_ONE = _cls.splat(-1)
    _cls.INFINITY = _cls.splat(math.inf)
    _cls.NEG_INFINITY = _cls.splat(-math.inf)
del _cls