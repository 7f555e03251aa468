"""Rectangle value with an area operation."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Rectangle:
    width: float
    height: float

    def get_area(self) -> float:
        return self.width * self.height


def make_rectangle(width: float, height: float) -> Rectangle:
    """Return a rectangle of the given size.

    Example:
        >>> r = make_rectangle(10, 20)
        >>> r.width, r.height, r.get_area()
        (10, 20, 200)
    """
    return Rectangle(width=width, height=height)
