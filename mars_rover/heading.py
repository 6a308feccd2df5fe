from __future__ import annotations

from enum import Enum
from typing import Dict, Tuple


class Heading(str, Enum):
    """Compass heading of the rover.

    The member value is the one-letter code used on input and in the final
    position line. Rotation and forward motion are table lookups over the four
    members; there is nothing else to dispatch on.
    """

    NORTH = "N"
    SOUTH = "S"
    EAST = "E"
    WEST = "W"

    @property
    def code(self) -> str:
        return self.value

    @property
    def label(self) -> str:
        """Human-readable name, e.g. ``"North"``."""
        return _LABELS[self]

    def forward_offset(self) -> Tuple[int, int]:
        """Unit cell offset (dx, dy) for one step forward."""
        return _OFFSETS[self]

    def rotate_left(self) -> "Heading":
        return _LEFT_OF[self]

    def rotate_right(self) -> "Heading":
        return _RIGHT_OF[self]


_LABELS: Dict[Heading, str] = {
    Heading.NORTH: "North",
    Heading.SOUTH: "South",
    Heading.EAST: "East",
    Heading.WEST: "West",
}

_OFFSETS: Dict[Heading, Tuple[int, int]] = {
    Heading.NORTH: (0, 1),
    Heading.SOUTH: (0, -1),
    Heading.EAST: (1, 0),
    Heading.WEST: (-1, 0),
}

# Counter-clockwise: N -> W -> S -> E -> N
_LEFT_OF: Dict[Heading, Heading] = {
    Heading.NORTH: Heading.WEST,
    Heading.WEST: Heading.SOUTH,
    Heading.SOUTH: Heading.EAST,
    Heading.EAST: Heading.NORTH,
}

_RIGHT_OF: Dict[Heading, Heading] = {left: h for h, left in _LEFT_OF.items()}
