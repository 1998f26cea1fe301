"""Axial hex coordinates and ring enumeration.

Axial coordinates ``(q, r)`` address a cell; ``s = -q - r`` is the implicit
third cube coordinate. Distances use the hex metric, so the cells at distance
``d`` from the origin form a ring of ``6 * d`` cells (one cell for ``d == 0``).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List

from .constants import RING_STEPS, HexDirection


@dataclass(frozen=True, order=True)
class Hex:
    """Immutable axial hex coordinate."""

    q: int
    r: int

    @property
    def s(self) -> int:
        return -self.q - self.r

    def __add__(self, other: Hex) -> Hex:
        return Hex(self.q + other.q, self.r + other.r)

    def __sub__(self, other: Hex) -> Hex:
        return Hex(self.q - other.q, self.r - other.r)

    def scale(self, factor: int) -> Hex:
        return Hex(self.q * factor, self.r * factor)

    def distance_to(self, other: Hex) -> int:
        """Number of steps along hex edges between the two cells."""
        return (self - other).length()

    def length(self) -> int:
        return max(abs(self.q), abs(self.r), abs(self.s))

    def neighbor(self, direction: HexDirection) -> Hex:
        return Hex(self.q + direction.dq, self.r + direction.dr)

    def __repr__(self) -> str:
        return f"Hex({self.q},{self.r})"


ORIGIN = Hex(0, 0)


def direction_vector(direction: HexDirection) -> Hex:
    return Hex(direction.dq, direction.dr)


def ring(radius: int, center: Hex = ORIGIN) -> List[Hex]:
    """Return the cells at exactly ``radius`` steps from ``center``.

    The walk starts at the south-west corner and goes counter-clockwise, so the
    order is stable between calls.
    """
    if radius < 0:
        raise ValueError(f"Ring radius must be non-negative, got {radius}")
    if radius == 0:
        return [center]
    cells: List[Hex] = []
    current = center + direction_vector(HexDirection.SOUTH_WEST).scale(radius)
    for direction in RING_STEPS:
        for _ in range(radius):
            cells.append(current)
            current = current.neighbor(direction)
    return cells


def hexagon(radius: int, center: Hex = ORIGIN) -> List[Hex]:
    """Return every cell within ``radius`` of ``center``, innermost ring first."""
    cells: List[Hex] = []
    for distance in range(radius + 1):
        cells.extend(ring(distance, center))
    return cells
