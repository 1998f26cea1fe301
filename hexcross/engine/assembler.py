"""CP-SAT assembly of one consistent grid from per-line candidates.

Ring propagation agrees on letters cell by cell, but it does not track which
prefix of one line goes with which prefix of a crossing line. The final
candidate sets can therefore still hold strings that never appear together in
a complete grid. This module picks one string per line so that every shared
cell holds the same letter, or reports that no such choice exists.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Mapping, Optional, Sequence, Tuple

from ortools.sat.python import cp_model

from ..core.constants import ALPHABET
from ..core.exceptions import AssemblyError
from ..core.hexgrid import Hex
from ..core.models import Line
from ..utils.logger import get_logger


LOGGER = get_logger(__name__)


@dataclass
class GridAssignment:
    """One letter per visited cell and the word each line reads."""

    cells: Dict[Hex, str]
    words: Dict[Line, str]

    def letter_at(self, cell: Hex) -> Optional[str]:
        return self.cells.get(cell)


class _SolutionCounter(cp_model.CpSolverSolutionCallback):
    """Counts solutions and stops the search once ``limit`` is reached."""

    def __init__(self, limit: int) -> None:
        super().__init__()
        self.limit = limit
        self.count = 0

    def on_solution_callback(self) -> None:
        self.count += 1
        if self.count >= self.limit:
            self.stop_search()


def _build_model(
    spans: Mapping[Line, Sequence[Hex]],
    solutions: Mapping[Line, Sequence[str]],
    alphabet: str,
) -> Optional[Tuple[cp_model.CpModel, Dict[Hex, cp_model.IntVar]]]:
    model = cp_model.CpModel()
    cell_vars: Dict[Hex, cp_model.IntVar] = {}
    index = {letter: position for position, letter in enumerate(alphabet)}

    for line, cells in spans.items():
        for cell in cells:
            if cell not in cell_vars:
                cell_vars[cell] = model.new_int_var(0, len(alphabet) - 1, f"L_{cell.q}_{cell.r}")

    for line, cells in spans.items():
        words = solutions.get(line, ())
        if not words:
            LOGGER.debug("Line %s has no candidates; grid is infeasible", line.label())
            return None
        tuples: List[List[int]] = []
        for word in words:
            if len(word) != len(cells):
                raise AssemblyError(
                    f"Candidate {word!r} of line {line.label()} has length {len(word)}, "
                    f"line spans {len(cells)} cells"
                )
            try:
                tuples.append([index[letter] for letter in word])
            except KeyError as exc:
                raise AssemblyError(
                    f"Candidate {word!r} of line {line.label()} uses a letter outside the alphabet"
                ) from exc
        model.add_allowed_assignments([cell_vars[cell] for cell in cells], tuples)

    return model, cell_vars


def assemble_grid(
    spans: Mapping[Line, Sequence[Hex]],
    solutions: Mapping[Line, Sequence[str]],
    timeout: float = 10.0,
    alphabet: str = ALPHABET,
) -> Optional[GridAssignment]:
    """Choose one candidate per line so that shared cells agree.

    Args:
        spans: The cells each line covers, in reading order.
        solutions: Final candidate strings per line.
        timeout: Solver time limit in seconds.
        alphabet: Letters the candidates are drawn from.

    Returns:
        The assignment, or None if no consistent choice exists.
    """
    if not spans:
        return GridAssignment(cells={}, words={})

    built = _build_model(spans, solutions, alphabet)
    if built is None:
        return None
    model, cell_vars = built

    solver = cp_model.CpSolver()
    solver.parameters.max_time_in_seconds = timeout
    solver.parameters.num_workers = 4

    LOGGER.info("CP-SAT: %d lines, %d cell vars, solving (timeout=%0.1fs)...",
                len(spans), len(cell_vars), timeout)
    status = solver.solve(model)

    if status not in (cp_model.OPTIMAL, cp_model.FEASIBLE):
        LOGGER.warning("CP-SAT: no grid assignment found (status=%s)", solver.status_name(status))
        return None

    LOGGER.info("CP-SAT: assignment found in %.2fs", solver.wall_time)
    cells = {cell: alphabet[solver.value(var)] for cell, var in cell_vars.items()}
    words = {
        line: "".join(cells[cell] for cell in line_cells)
        for line, line_cells in spans.items()
    }
    return GridAssignment(cells=cells, words=words)


def count_assignments(
    spans: Mapping[Line, Sequence[Hex]],
    solutions: Mapping[Line, Sequence[str]],
    limit: int = 100,
    timeout: float = 10.0,
    alphabet: str = ALPHABET,
) -> int:
    """Number of distinct consistent grids, capped at ``limit``."""
    if not spans:
        return 1
    built = _build_model(spans, solutions, alphabet)
    if built is None:
        return 0
    model, _ = built

    solver = cp_model.CpSolver()
    solver.parameters.max_time_in_seconds = timeout
    solver.parameters.enumerate_all_solutions = True
    solver.parameters.num_workers = 1
    counter = _SolutionCounter(limit)
    solver.solve(model, counter)
    return counter.count
