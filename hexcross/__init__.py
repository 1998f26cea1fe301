"""Ring-based constraint propagation for hexagonal regex crosswords.

This package exposes the public API surface via:

- ``hexcross.engine.crossword.Crossword``: lines, constraints and prefixes.
- ``hexcross.engine.driver.solve``: ring-by-ring propagation and acceptance.
- ``hexcross.engine.search`` helpers: pattern and predicate constraints.
"""

from .core.constants import ALPHABET, HexDirection
from .core.hexgrid import Hex
from .core.models import Line
from .engine.crossword import Crossword
from .engine.driver import RingDriver, SolveResult, SolverConfig, solve
from .engine.search import FunctionSearch, PatternSearch, expression, function

__all__ = [
    "ALPHABET",
    "Crossword",
    "FunctionSearch",
    "Hex",
    "HexDirection",
    "Line",
    "PatternSearch",
    "RingDriver",
    "SolveResult",
    "SolverConfig",
    "expression",
    "function",
    "solve",
]

__version__ = "0.1.0"
