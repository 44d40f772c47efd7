"""Specificity model: the (a, b, c) triple and its integer encoding."""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["DEFAULT_BASE", "Specificity", "to_value"]

DEFAULT_BASE = 256


@dataclass(frozen=True, order=True)
class Specificity:
    """Counts of simple selectors per specificity bucket for one selector.

    Attributes:
        a: ID selectors.
        b: Class, attribute and pseudo-class selectors.
        c: Type selectors and pseudo-elements.

    Instances compare lexicographically on ``(a, b, c)``.
    """

    a: int = 0
    b: int = 0
    c: int = 0

    @classmethod
    def zero(cls) -> Specificity:
        return cls(0, 0, 0)

    def as_tuple(self) -> tuple[int, int, int]:
        return (self.a, self.b, self.c)

    def value(self, base: int = DEFAULT_BASE) -> int:
        return to_value(self, base)

    def __str__(self) -> str:
        return f"{self.a}, {self.b}, {self.c}"


def to_value(triple: Specificity, base: int = DEFAULT_BASE) -> int:
    """Encode *triple* as ``a*base**2 + b*base + c``.

    Ordering of the encoded values matches triple ordering only while every
    count stays below *base*. Larger counts carry into the next column; use a
    bigger base for such selectors.
    """
    if base < 2:
        raise ValueError(f"Invalid base: {base!r} (must be at least 2)")
    return triple.a * base**2 + triple.b * base + triple.c
