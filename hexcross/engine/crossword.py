"""The crossword aggregate: lines, their constraints and surviving prefixes."""

from __future__ import annotations

from typing import Dict, Iterable, Iterator, List, Optional, Tuple, Union

from ..core.constants import DEFAULT_MULTIPLICITY
from ..core.exceptions import ConfigurationError, DuplicateLineError, UnknownLineError
from ..core.hexgrid import Hex, ring
from ..core.models import Line, LineTask, Task
from ..utils.logger import get_logger
from .search import Predicate, Search, as_search


LOGGER = get_logger(__name__)

EMPTY_PREFIX: Tuple[str, ...] = ("",)


class Crossword:
    """Hexagonal crossword of a fixed radius.

    ``candidates`` holds, per line, the prefixes of its eventual solution found
    by the rings processed so far. ``None`` marks a line no ring has touched
    yet; an empty tuple marks a line whose prefixes have all been pruned.
    """

    def __init__(self, radius: int, multiplicity: int = DEFAULT_MULTIPLICITY) -> None:
        if radius < 0:
            raise ConfigurationError(f"Crossword radius must be non-negative, got {radius}")
        if multiplicity < 1:
            raise ConfigurationError(f"Cell multiplicity must be positive, got {multiplicity}")
        self.radius = radius
        self.multiplicity = multiplicity
        self.constraints: Dict[Line, Search] = {}
        self.candidates: Dict[Line, Optional[Tuple[str, ...]]] = {}

    def add(self, line: Line, search: Union[Search, str, Predicate]) -> None:
        if line in self.constraints:
            raise DuplicateLineError(f"Line {line.label()} is already registered")
        self.constraints[line] = as_search(search)
        self.candidates[line] = None
        LOGGER.debug("Registered line %s with %s", line.label(), self.constraints[line].describe())

    def add_all(self, entries: Iterable[Tuple[Line, Union[Search, str, Predicate]]]) -> None:
        for line, search in entries:
            self.add(line, search)

    @property
    def lines(self) -> List[Line]:
        return list(self.constraints)

    def __len__(self) -> int:
        return len(self.constraints)

    def __contains__(self, line: object) -> bool:
        return line in self.constraints

    def __iter__(self) -> Iterator[Line]:
        return iter(self.constraints)

    def search_of(self, line: Line) -> Search:
        self._require(line)
        return self.constraints[line]

    def span_of(self, line: Line) -> List[Hex]:
        self._require(line)
        return line.span(self.radius)

    def candidates_of(self, line: Line) -> Tuple[str, ...]:
        self._require(line)
        current = self.candidates[line]
        if current is None:
            return EMPTY_PREFIX
        return current

    def update_candidates(self, line: Line, new: Iterable[str]) -> None:
        self._require(line)
        self.candidates[line] = tuple(new)

    def is_touched(self, line: Line) -> bool:
        self._require(line)
        return self.candidates[line] is not None

    def reset(self) -> None:
        for line in self.candidates:
            self.candidates[line] = None

    def cells_at(self, ring_distance: int) -> List[Hex]:
        return ring(ring_distance)

    def step_for(self, ring_distance: int) -> int:
        """Index along every line that ring ``ring_distance`` extends."""
        return self.radius - ring_distance

    def lines_at(self, ring_distance: int, cell: Hex) -> List[Line]:
        step = self.step_for(ring_distance)
        return [line for line in self.constraints if line.at(step) == cell]

    def build_task(self, ring_distance: int, cell: Hex) -> Task:
        """Bundle every line whose step for this ring lands on ``cell``."""
        line_tasks = tuple(
            LineTask(line=line, search=self.constraints[line], candidates=self.candidates_of(line))
            for line in self.lines_at(ring_distance, cell)
        )
        return Task(ring_distance=ring_distance, cell=cell, lines=line_tasks)

    def _require(self, line: Line) -> None:
        if line not in self.constraints:
            raise UnknownLineError(f"Line {line.label()} is not part of this crossword")

    def __repr__(self) -> str:
        return f"Crossword(radius={self.radius}, lines={len(self)}, multiplicity={self.multiplicity})"
