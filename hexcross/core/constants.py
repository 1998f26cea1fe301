"""Shared constants and enumerations for the hexagonal crossword solver."""

from __future__ import annotations

from enum import Enum
from typing import Tuple


ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"

# Number of lines crossing each cell of a two-direction wedge layout.
DEFAULT_MULTIPLICITY = 2


class HexDirection(Enum):
    """The six axial unit steps of a hex grid."""

    EAST = (1, 0)
    NORTH_EAST = (1, -1)
    NORTH_WEST = (0, -1)
    WEST = (-1, 0)
    SOUTH_WEST = (-1, 1)
    SOUTH_EAST = (0, 1)

    @property
    def dq(self) -> int:
        return self.value[0]

    @property
    def dr(self) -> int:
        return self.value[1]

    @property
    def opposite(self) -> "HexDirection":
        return HexDirection((-self.dq, -self.dr))


# Ring walk order: starting at the south-west corner, these steps trace a ring
# counter-clockwise back to where they started.
RING_STEPS: Tuple[HexDirection, ...] = (
    HexDirection.EAST,
    HexDirection.NORTH_EAST,
    HexDirection.NORTH_WEST,
    HexDirection.WEST,
    HexDirection.SOUTH_WEST,
    HexDirection.SOUTH_EAST,
)
