"""Data models shared by the propagation engine."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Dict, List, Optional, Tuple

from .constants import HexDirection
from .hexgrid import ORIGIN, Hex

if TYPE_CHECKING:
    from ..engine.search import Search


@dataclass(frozen=True)
class Line:
    """A directed ray of cells: ``start`` stepped repeatedly along ``direction``."""

    start: Hex
    direction: HexDirection

    def at(self, distance: int) -> Hex:
        return Hex(
            self.start.q + self.direction.dq * distance,
            self.start.r + self.direction.dr * distance,
        )

    def cells(self, max_radius: int) -> List[Hex]:
        """Cells visited from ``start`` until the walk leaves ``max_radius``."""
        cells: List[Hex] = []
        current = self.start
        while current.distance_to(ORIGIN) <= max_radius:
            cells.append(current)
            current = current.neighbor(self.direction)
        return cells

    def span(self, radius: int) -> List[Hex]:
        """The ring-aligned head of the line.

        Step ``k`` must land on ring ``radius - k``; the walk stops at the first
        step that does not, or after the center. These are the cells the ring
        driver visits, one per ring.
        """
        cells: List[Hex] = []
        for step in range(radius + 1):
            cell = self.at(step)
            if cell.length() != radius - step:
                break
            cells.append(cell)
        return cells

    def label(self) -> str:
        return f"({self.start.q},{self.start.r}) {self.direction.name}"


@dataclass(frozen=True)
class LineTask:
    """One line's share of a Task: its constraint and its current prefixes."""

    line: Line
    search: "Search"
    candidates: Tuple[str, ...]


@dataclass(frozen=True)
class Task:
    """The lines crossing ``cell`` at ``ring_distance``, evaluated together."""

    ring_distance: int
    cell: Hex
    lines: Tuple[LineTask, ...]

    def __len__(self) -> int:
        return len(self.lines)


@dataclass
class AcceptanceReport:
    """Outcome of the full-match pass that runs after ring 0."""

    accepted: Dict[Line, Tuple[str, ...]] = field(default_factory=dict)
    rejected: Dict[Line, Tuple[str, ...]] = field(default_factory=dict)

    @property
    def rejected_count(self) -> int:
        return sum(len(strings) for strings in self.rejected.values())

    def rejected_for(self, line: Line) -> Tuple[str, ...]:
        return self.rejected.get(line, ())


@dataclass
class RingSummary:
    """Per-ring bookkeeping kept for logging and reports."""

    ring_distance: int
    tasks: int
    empty_cells: List[Hex] = field(default_factory=list)
    letters: Dict[Hex, Tuple[str, ...]] = field(default_factory=dict)

    def letters_at(self, cell: Hex) -> Optional[Tuple[str, ...]]:
        return self.letters.get(cell)
