"""Two-dimensional value types used by scalable records."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class Point:
    """A position in points, measured from the scene origin."""

    x: float
    y: float

    def __truediv__(self, divisor: float) -> "Point":
        return Point(x=self.x / divisor, y=self.y / divisor)

    def as_pair(self) -> Tuple[float, float]:
        """Return the ``[x, y]`` pair used in serialised documents."""

        return (self.x, self.y)


@dataclass(frozen=True)
class Size:
    """A width and height in points."""

    width: float
    height: float

    def __truediv__(self, divisor: float) -> "Size":
        return Size(width=self.width / divisor, height=self.height / divisor)

    def as_pair(self) -> Tuple[float, float]:
        """Return the ``[width, height]`` pair used in serialised documents."""

        return (self.width, self.height)


__all__ = ["Point", "Size"]
