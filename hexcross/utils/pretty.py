"""Pretty-print helpers for hex crosswords and solve results."""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, Dict, List, Optional

from ..core.hexgrid import Hex

if TYPE_CHECKING:
    from ..engine.crossword import Crossword
    from ..engine.driver import SolveResult


OUTSIDE = "."
UNKNOWN = "?"


def cell_symbol(cell: Hex, visited: Dict[Hex, Optional[str]]) -> str:
    if cell not in visited:
        return OUTSIDE
    return visited[cell] or UNKNOWN


def format_hexagon(radius: int, letters: Dict[Hex, Optional[str]]) -> str:
    """Render the hexagon row by row, each row shifted half a cell."""
    lines: List[str] = []
    for r in range(-radius, radius + 1):
        q_min = max(-radius, -r - radius)
        q_max = min(radius, -r + radius)
        row = " ".join(cell_symbol(Hex(q, r), letters) for q in range(q_min, q_max + 1))
        lines.append(" " * abs(r) + row)
    return "\n".join(lines)


def format_result(crossword: Crossword, result: SolveResult) -> str:
    letters: Dict[Hex, Optional[str]] = {}
    for cells in result.spans.values():
        for cell in cells:
            letters.setdefault(cell, None)
    if result.assignment is not None:
        letters.update(result.assignment.cells)
    else:
        for cell in letters:
            shared = result.letters_at(cell)
            if len(shared) == 1:
                letters[cell] = shared[0]

    out = [format_hexagon(crossword.radius, letters), ""]
    for line in crossword:
        words = result.words_of(line)
        rendered = ", ".join(words) if words else "(none)"
        out.append(f"{line.label():<22} {crossword.search_of(line).describe():<20} {rendered}")
        rejected = result.acceptance.rejected_for(line)
        if rejected:
            out.append(f"{'':<22} {'rejected:':<20} {', '.join(rejected)}")
    if result.stopped_early:
        out.append("")
        out.append("Stopped early: a cell had no letter shared by its lines.")
    return "\n".join(out)


def pretty_print_result(
    crossword: Crossword,
    result: SolveResult,
    *,
    label: str | None = None,
    stream=None,
) -> None:
    """Print the solved grid and the surviving candidates of every line."""

    stream = stream or sys.stdout
    if label:
        print(label, file=stream)
    print(format_result(crossword, result), file=stream)
