"""Setup-time validation of a crossword layout."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List

from ..core.constants import ALPHABET
from ..core.exceptions import (AlphabetError, CellMultiplicityError, ConfigurationError,
                               LineAlignmentError)
from .crossword import Crossword
from ..utils.logger import get_logger


LOGGER = get_logger(__name__)


@dataclass
class ValidationResult:
    ok: bool
    messages: List[str]


class LayoutValidator:
    """Checks that the ring driver can visit every line cell exactly once."""

    def __init__(self, crossword: Crossword, alphabet: str = ALPHABET) -> None:
        self.crossword = crossword
        self.alphabet = alphabet

    def validate(self) -> ValidationResult:
        try:
            self.ensure_valid()
        except ConfigurationError as exc:
            LOGGER.error("Layout validation failed: %s", exc)
            return ValidationResult(ok=False, messages=[str(exc)])
        return ValidationResult(ok=True, messages=[])

    def ensure_valid(self) -> None:
        self._check_alphabet()
        self._check_line_starts()
        self._check_cell_multiplicity()

    def _check_alphabet(self) -> None:
        if not self.alphabet:
            raise AlphabetError("Alphabet is empty")
        if len(set(self.alphabet)) != len(self.alphabet):
            raise AlphabetError(f"Alphabet {self.alphabet!r} repeats letters")
        for letter in self.alphabet:
            if not ("A" <= letter <= "Z"):
                raise AlphabetError(f"Invalid alphabet letter {letter!r}; expected A-Z")

    def _check_line_starts(self) -> None:
        radius = self.crossword.radius
        for line in self.crossword:
            distance = line.start.length()
            if distance != radius:
                raise LineAlignmentError(
                    f"Line {line.label()} starts on ring {distance}, expected the outer ring {radius}"
                )

    def _check_cell_multiplicity(self) -> None:
        expected = self.crossword.multiplicity
        for ring_distance in range(self.crossword.radius, -1, -1):
            for cell in self.crossword.cells_at(ring_distance):
                lines = self.crossword.lines_at(ring_distance, cell)
                if lines and len(lines) != expected:
                    labels = ", ".join(line.label() for line in lines)
                    raise CellMultiplicityError(
                        f"Cell {cell} on ring {ring_distance} is crossed by {len(lines)} "
                        f"line(s) ({labels}); expected {expected}"
                    )
