"""Static puzzle declarations.

Puzzles here use the corner wedge layout: the cells with ``q >= 0`` and
``r >= 0`` inside the hexagon. Rows run WEST and columns run NORTH_WEST, each
starting on the outer ring, so every step of a line moves one ring inward and
every wedge cell is crossed by exactly one row and one column.
"""

from __future__ import annotations

from typing import Callable, Dict, List, Sequence, Tuple, Union

from ..core.constants import HexDirection
from ..core.hexgrid import Hex
from ..core.models import Line
from ..engine.crossword import Crossword
from ..engine.search import FunctionSearch, PatternSearch, Predicate, Search, expression, function


Constraint = Union[Search, str, Predicate]


def exp(text: str) -> PatternSearch:
    return expression(text)


def fun(predicate: Predicate) -> FunctionSearch:
    return function(predicate)


def backreference_two_same_chars(candidate: str) -> bool:
    """``(.)\\1``: the second character repeats the first.

    A single character is accepted because it can still be completed.
    """
    if len(candidate) < 2:
        return True
    return candidate[0] == candidate[1]


def wedge_rows(radius: int) -> List[Line]:
    """Rows of the wedge, ``r = 0`` first; row ``r`` spans ``radius - r + 1`` cells."""
    return [Line(Hex(radius - r, r), HexDirection.WEST) for r in range(radius + 1)]


def wedge_columns(radius: int) -> List[Line]:
    """Columns of the wedge, ``q = 0`` first; column ``q`` spans ``radius - q + 1`` cells."""
    return [Line(Hex(q, radius - q), HexDirection.NORTH_WEST) for q in range(radius + 1)]


def build_wedge(radius: int, rows: Sequence[Constraint], columns: Sequence[Constraint]) -> Crossword:
    if len(rows) != radius + 1 or len(columns) != radius + 1:
        raise ValueError(
            f"A wedge of radius {radius} needs {radius + 1} row and column constraints, "
            f"got {len(rows)} and {len(columns)}"
        )
    crossword = Crossword(radius, multiplicity=2)
    for line, constraint in zip(wedge_rows(radius), rows):
        crossword.add(line, constraint)
    for line, constraint in zip(wedge_columns(radius), columns):
        crossword.add(line, constraint)
    return crossword


def tiny_crossword() -> Crossword:
    """Radius 1: one letter on each of the two outer cells plus the center."""
    return build_wedge(
        1,
        rows=[exp(r".A"), exp(r"B|D")],
        columns=[exp(r"[BC]A|CB"), exp(r"E")],
    )


def basic_crossword() -> Crossword:
    """Radius 2 with a predicate row and an ambiguity only full matching resolves."""
    return build_wedge(
        2,
        rows=[exp(r"(H|W)E[XZ]"), fun(backreference_two_same_chars), exp(r"O|Q")],
        columns=[exp(r"O.*X"), exp(r"A[DEF]"), exp(r"H|K")],
    )


def contradiction_crossword() -> Crossword:
    """Radius 1 where the row and column through the center disagree."""
    return build_wedge(
        1,
        rows=[exp(r".A"), exp(r"B|D")],
        columns=[exp(r".B"), exp(r"E")],
    )


PUZZLES: Dict[str, Callable[[], Crossword]] = {
    "tiny": tiny_crossword,
    "basic": basic_crossword,
    "contradiction": contradiction_crossword,
}


def load_puzzle(name: str) -> Crossword:
    try:
        builder = PUZZLES[name]
    except KeyError as exc:
        raise KeyError(f"Unknown puzzle {name!r}; choose from {sorted(PUZZLES)}") from exc
    return builder()


def puzzle_names() -> Tuple[str, ...]:
    return tuple(PUZZLES)
