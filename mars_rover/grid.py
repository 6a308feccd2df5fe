from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, FrozenSet, Iterable, List, Tuple

Cell = Tuple[int, int]


@dataclass(frozen=True)
class Grid:
    """Bounded rectangular grid with a set of obstacle cells.

    Coordinates are defined with origin at the bottom-left cell:
    - x increases to the right
    - y increases upward

    Obstacles are stored as a flat set of cells and are not checked against the
    grid bounds; an obstacle outside the grid simply never blocks anything.

    Attributes
    ----------
    width : int
        Number of columns (x in ``[0, width)``).
    height : int
        Number of rows (y in ``[0, height)``).
    obstacles : frozenset[tuple[int, int]]
        Impassable cells.
    """

    width: int
    height: int
    obstacles: FrozenSet[Cell] = field(default_factory=frozenset)

    @classmethod
    def with_obstacles(cls, width: int, height: int, obstacles: Iterable[Cell] = ()) -> "Grid":
        """Create a grid from any iterable of (x, y) pairs."""
        cells = frozenset((int(x), int(y)) for x, y in obstacles)
        return cls(width=int(width), height=int(height), obstacles=cells)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def is_inside(self, x: int, y: int) -> bool:
        """Return True if (x, y) lies within the grid bounds."""
        return 0 <= x < self.width and 0 <= y < self.height

    def has_obstacle(self, x: int, y: int) -> bool:
        """Return True if (x, y) is an obstacle cell, regardless of bounds."""
        return (x, y) in self.obstacles

    def is_valid(self, x: int, y: int) -> bool:
        """Return True if the rover may occupy (x, y)."""
        return self.is_inside(x, y) and not self.has_obstacle(x, y)

    # ------------------------------------------------------------------
    # Utility
    # ------------------------------------------------------------------
    def describe(self) -> List[str]:
        """Grid summary followed by one line per obstacle."""
        lines = [f"Grid: {self.width} x {self.height}"]
        lines.extend(f"Obstacle at ({x}, {y})" for x, y in sorted(self.obstacles))
        return lines

    def to_dict(self) -> Dict[str, Any]:
        """Serialize grid description to a Python dict."""
        return {
            "width": self.width,
            "height": self.height,
            "obstacles": [[x, y] for x, y in sorted(self.obstacles)],
        }
