"""Small mutable vector types used for positions, colours and bounds."""

from __future__ import annotations

import operator
from dataclasses import dataclass, field, fields
from numbers import Real
from typing import Callable, Optional, Tuple


def _fmt(value: float) -> str:
    return format(value, "g")


class _Components:
    """Component-wise arithmetic shared by the vector types."""

    def _values(self) -> Tuple[float, ...]:
        return tuple(getattr(self, f.name) for f in fields(self))

    def _combine(self, other, op: Callable[[float, float], float]) -> Optional[Tuple[float, ...]]:
        mine = self._values()
        if isinstance(other, type(self)):
            theirs = other._values()
        elif isinstance(other, Real):
            theirs = (other,) * len(mine)
        else:
            return None
        return tuple(op(lhs, rhs) for lhs, rhs in zip(mine, theirs))

    def _binary(self, other, op):
        values = self._combine(other, op)
        if values is None:
            return NotImplemented
        return type(self)(*values)

    def _inplace(self, other, op):
        values = self._combine(other, op)
        if values is None:
            return NotImplemented
        for f, value in zip(fields(self), values):
            setattr(self, f.name, value)
        return self

    def _show(self, *names: str) -> str:
        return ", ".join(_fmt(getattr(self, name)) for name in names)

    def __iadd__(self, other):
        return self._inplace(other, operator.add)

    def __isub__(self, other):
        return self._inplace(other, operator.sub)

    def __imul__(self, other):
        return self._inplace(other, operator.mul)

    def __itruediv__(self, other):
        return self._inplace(other, operator.truediv)


@dataclass
class Dyad(_Components):
    """A pair of floats, such as a screen size."""

    x: float = 0.0
    y: float = 0.0

    def set(self, x: float, y: float) -> "Dyad":
        self.x = x
        self.y = y
        return self

    def __add__(self, other):
        return self._binary(other, operator.add)

    def __sub__(self, other):
        return self._binary(other, operator.sub)

    def __mul__(self, other):
        return self._binary(other, operator.mul)

    def __truediv__(self, other):
        return self._binary(other, operator.truediv)

    def __str__(self) -> str:
        return self._show("x", "y")


@dataclass
class Triad(_Components):
    """A three-component vector, such as a position."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def set(self, x: float, y: float, z: float) -> "Triad":
        self.x = x
        self.y = y
        self.z = z
        return self

    def __add__(self, other):
        return self._binary(other, operator.add)

    def __sub__(self, other):
        return self._binary(other, operator.sub)

    def __mul__(self, other):
        return self._binary(other, operator.mul)

    def __truediv__(self, other):
        return self._binary(other, operator.truediv)

    def __str__(self) -> str:
        return self._show("x", "y", "z")

    def dot_product(self, other: "Triad") -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z


@dataclass
class Quad(_Components):
    """A four-component value, used for colours and bounding boxes."""

    a: float = 0.0
    b: float = 0.0
    c: float = 0.0
    d: float = 0.0

    def set(self, a: float, b: float, c: float, d: float) -> "Quad":
        self.a = a
        self.b = b
        self.c = c
        self.d = d
        return self

    def __add__(self, other):
        return self._binary(other, operator.add)

    def __sub__(self, other):
        return self._binary(other, operator.sub)

    def __mul__(self, other):
        return self._binary(other, operator.mul)

    def __truediv__(self, other):
        return self._binary(other, operator.truediv)

    def __str__(self) -> str:
        # Only the first three components are shown.
        return self._show("a", "b", "c")

    def dot_product(self, other: "Quad") -> float:
        return self.a * other.a + self.b * other.b + self.c * other.c


@dataclass
class Color:
    """An RGBA colour, white and opaque by default."""

    r: float = 1.0
    g: float = 1.0
    b: float = 1.0
    a: float = 1.0

    def set(self, r: float, g: float, b: float, a: float) -> None:
        self.r = r
        self.g = g
        self.b = b
        self.a = a


@dataclass
class Point:
    """A position with a colour."""

    value: Triad = field(default_factory=Triad)
    color: Color = field(default_factory=Color)


@dataclass
class Vector:
    """A direction with a magnitude."""

    direction: Triad = field(default_factory=Triad)
    magnitude: float = 0.0