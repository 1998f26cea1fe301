"""Ring-by-ring propagation from the outer boundary to the center.

Two-phase approach:
  1. Propagate: for each ring, outermost first, build one task per ring cell,
     evaluate the tasks against a snapshot of the current prefixes and commit
     all of them once the ring is done.
  2. Accept: after ring 0, drop every string that only partially matches its
     line's constraint, then optionally assemble one consistent grid.
"""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor, as_completed
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

from ..core.constants import ALPHABET
from ..core.hexgrid import Hex
from ..core.models import AcceptanceReport, Line, RingSummary, Task
from ..utils.logger import get_logger
from .assembler import GridAssignment, assemble_grid
from .crossword import Crossword
from .propagator import PropagationResult, propagate
from .validator import LayoutValidator


LOGGER = get_logger(__name__)


@dataclass
class SolverConfig:
    max_workers: int = 1
    alphabet: str = ALPHABET
    require_full_match: bool = True
    stop_when_empty: bool = False
    assemble: bool = True
    assemble_timeout: float = 10.0


@dataclass
class SolveResult:
    radius: int
    solutions: Dict[Line, Tuple[str, ...]]
    acceptance: AcceptanceReport
    rings: List[RingSummary] = field(default_factory=list)
    spans: Dict[Line, List[Hex]] = field(default_factory=dict)
    assignment: Optional[GridAssignment] = None
    stopped_early: bool = False

    @property
    def has_solution(self) -> bool:
        return all(self.solutions.values())

    @property
    def is_solved(self) -> bool:
        return all(len(words) == 1 for words in self.solutions.values())

    def words_of(self, line: Line) -> Tuple[str, ...]:
        return self.solutions.get(line, ())

    def letters_at(self, cell: Hex) -> Tuple[str, ...]:
        """Letters the surviving candidates place on ``cell``, in alphabet order."""
        letters = set()
        for line, cells in self.spans.items():
            if cell in cells:
                position = cells.index(cell)
                letters.update(word[position] for word in self.solutions.get(line, ()))
        return tuple(sorted(letters))


class RingDriver:
    """Runs candidate propagation over every ring of a crossword."""

    def __init__(self, crossword: Crossword, config: Optional[SolverConfig] = None) -> None:
        self.crossword = crossword
        self.config = config or SolverConfig()

    def run(self) -> SolveResult:
        crossword = self.crossword
        LayoutValidator(crossword, self.config.alphabet).ensure_valid()
        crossword.reset()
        LOGGER.info("Solving %r", crossword)

        rings: List[RingSummary] = []
        stopped_early = False
        for ring_distance in range(crossword.radius, -1, -1):
            summary = self.process_ring(ring_distance)
            rings.append(summary)
            if self.config.stop_when_empty and summary.empty_cells:
                LOGGER.info(
                    "Ring %d left %d cell(s) without letters; skipping remaining rings",
                    ring_distance,
                    len(summary.empty_cells),
                )
                for line in crossword:
                    crossword.update_candidates(line, ())
                stopped_early = True
                break

        acceptance = self.accept()
        spans = {line: crossword.span_of(line) for line in crossword}
        result = SolveResult(
            radius=crossword.radius,
            solutions=dict(acceptance.accepted),
            acceptance=acceptance,
            rings=rings,
            spans=spans,
            stopped_early=stopped_early,
        )
        if self.config.assemble:
            result.assignment = assemble_grid(
                spans,
                result.solutions,
                timeout=self.config.assemble_timeout,
                alphabet=self.config.alphabet,
            )
        LOGGER.info(
            "Solve finished: %d/%d lines with candidates, %d rejected by full match",
            sum(1 for words in result.solutions.values() if words),
            len(result.solutions),
            acceptance.rejected_count,
        )
        return result

    def process_ring(self, ring_distance: int) -> RingSummary:
        """Evaluate every task of one ring, then commit their prefixes together."""
        tasks = self.build_tasks(ring_distance)
        results = self._evaluate(tasks)

        summary = RingSummary(ring_distance=ring_distance, tasks=len(tasks))
        for result in results:
            for line, candidates in result.candidates.items():
                self.crossword.update_candidates(line, candidates)
            summary.letters[result.cell] = result.letters
            if result.is_empty:
                summary.empty_cells.append(result.cell)

        LOGGER.info(
            "Ring %d: %d task(s), %d without a shared letter",
            ring_distance,
            summary.tasks,
            len(summary.empty_cells),
        )
        return summary

    def build_tasks(self, ring_distance: int) -> List[Task]:
        tasks: List[Task] = []
        for cell in self.crossword.cells_at(ring_distance):
            task = self.crossword.build_task(ring_distance, cell)
            if task.lines:
                tasks.append(task)
        return tasks

    def _evaluate(self, tasks: List[Task]) -> List[PropagationResult]:
        alphabet = self.config.alphabet
        if self.config.max_workers <= 1 or len(tasks) <= 1:
            return [self._run_task(task, alphabet) for task in tasks]

        order = {task.cell: position for position, task in enumerate(tasks)}
        results: List[PropagationResult] = []
        with ThreadPoolExecutor(max_workers=self.config.max_workers) as executor:
            futures = {executor.submit(self._run_task, task, alphabet): task for task in tasks}
            for future in as_completed(futures):
                results.append(future.result())
        results.sort(key=lambda result: order[result.cell])
        return results

    @staticmethod
    def _run_task(task: Task, alphabet: str) -> PropagationResult:
        result = propagate(task, alphabet)
        LOGGER.debug(
            "Ring %d cell %s: %d line(s), letters %s",
            task.ring_distance,
            task.cell,
            len(task.lines),
            "".join(result.letters) or "-",
        )
        return result

    def accept(self) -> AcceptanceReport:
        """Split the final strings of every line into accepted and rejected."""
        report = AcceptanceReport()
        for line in self.crossword:
            words = self.crossword.candidates_of(line) if self.crossword.is_touched(line) else ()
            if not self.config.require_full_match:
                report.accepted[line] = words
                continue
            search = self.crossword.search_of(line)
            accepted: List[str] = []
            rejected: List[str] = []
            for word in words:
                (accepted if search.fully_matches(word) else rejected).append(word)
            report.accepted[line] = tuple(accepted)
            if rejected:
                report.rejected[line] = tuple(rejected)
                LOGGER.debug(
                    "Line %s: %d candidate(s) rejected by full match",
                    line.label(),
                    len(rejected),
                )
        return report


def solve(crossword: Crossword, config: Optional[SolverConfig] = None) -> SolveResult:
    """Run every ring of ``crossword`` and return the accepted candidates."""
    return RingDriver(crossword, config).run()
