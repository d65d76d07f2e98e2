"""Rectangle model: a mutable width/height record with a derived area."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Rectangle:
    """A rectangle record.

    The area is never cached; ``get_area`` reflects any later change to
    ``width`` or ``height``.
    """

    width: float
    height: float

    def get_area(self) -> float:
        return self.width * self.height

    @property
    def area(self) -> float:
        return self.get_area()


def make_rectangle(width: float, height: float) -> Rectangle:
    """Create a :class:`Rectangle`. No range checks are applied."""
    return Rectangle(width, height)
