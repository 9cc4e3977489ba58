"""Basic lab geometry: points, walls, beacons, target areas and start grids."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Iterable, Iterator


@dataclass
class Vertex:
    """A point in lab coordinates."""

    x: float = 0.0
    y: float = 0.0

    def copy(self) -> Vertex:
        """Return an independent copy of this point."""
        return replace(self)


@dataclass
class Wall:
    """A polygonal wall: an ordered list of corners with a height."""

    corners: list[Vertex] = field(default_factory=list)
    height: float = 0.0

    def __post_init__(self) -> None:
        self.corners = [corner.copy() for corner in self.corners]

    @classmethod
    def from_points(cls, points: Iterable[Vertex], height: float = 0.0) -> Wall:
        """Build a wall from any iterable of points."""
        return cls(list(points), height)

    def add_corner(self, vertex: Vertex) -> None:
        """Append a copy of ``vertex`` to the wall outline."""
        self.corners.append(vertex.copy())


@dataclass
class Beacon:
    """A beacon at a point, with a height compared against wall heights."""

    position: Vertex = field(default_factory=Vertex)
    height: float = 1.0

    def __post_init__(self) -> None:
        self.position = self.position.copy()


@dataclass
class Target:
    """A circular target area."""

    position: Vertex = field(default_factory=Vertex)
    radius: float = 0.0

    def __post_init__(self) -> None:
        self.position = self.position.copy()


@dataclass
class GridElement:
    """A start position: a point and an orientation in degrees."""

    position: Vertex = field(default_factory=Vertex)
    direction: float = 0.0

    def copy(self) -> GridElement:
        """Return an independent copy of this start position."""
        return GridElement(self.position.copy(), self.direction)


class Grid:
    """The ordered set of start positions of a lab."""

    def __init__(self, elements: Iterable[GridElement] = ()) -> None:
        self._elements: list[GridElement] = []
        for element in elements:
            self.add_position(element)

    def add_position(self, element: GridElement) -> None:
        """Append a copy of ``element`` as the next start position."""
        self._elements.append(element.copy())

    def position(self, index: int) -> GridElement:
        """Return the start position at ``index`` (counted from 0)."""
        if not 0 <= index < len(self._elements):
            raise IndexError(f"grid position {index} out of range")
        return self._elements[index]

    def __len__(self) -> int:
        return len(self._elements)

    def __iter__(self) -> Iterator[GridElement]:
        return iter(self._elements)

    def __repr__(self) -> str:
        return f"Grid({self._elements!r})"