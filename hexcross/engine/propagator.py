"""Candidate propagation for a single (ring, cell) task.

Every line in a task places its next character on the same physical cell, so
the letters a line may place there are intersected across the task before
any prefix is extended. A line keeps ``prefix + letter`` only when the letter
survives the intersection and its own constraint still partially matches.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, FrozenSet, List, Optional, Tuple

from ..core.constants import ALPHABET
from ..core.hexgrid import Hex
from ..core.models import Line, LineTask, Task
from ..utils.logger import get_logger


LOGGER = get_logger(__name__)


@dataclass
class PropagationResult:
    """Per-line prefix sets produced for one task."""

    ring_distance: int
    cell: Optional[Hex]
    letters: Tuple[str, ...]
    candidates: Dict[Line, Tuple[str, ...]] = field(default_factory=dict)
    accepted: Dict[Line, FrozenSet[str]] = field(default_factory=dict)

    @property
    def is_empty(self) -> bool:
        return not self.letters


def extend_line(line_task: LineTask, alphabet: str = ALPHABET) -> Dict[str, List[str]]:
    """Group the surviving one-letter extensions of a line by their new letter."""
    buckets: Dict[str, List[str]] = {}
    search = line_task.search
    for prefix in line_task.candidates:
        for letter in alphabet:
            extended = prefix + letter
            if search.partially_matches(extended):
                buckets.setdefault(letter, []).append(extended)
    return buckets


def propagate(task: Task, alphabet: str = ALPHABET) -> PropagationResult:
    if not task.lines:
        return PropagationResult(ring_distance=task.ring_distance, cell=task.cell, letters=())

    buckets_by_line = [(line_task.line, extend_line(line_task, alphabet)) for line_task in task.lines]

    shared = frozenset.intersection(*(frozenset(buckets) for _, buckets in buckets_by_line))
    letters = tuple(letter for letter in alphabet if letter in shared)

    result = PropagationResult(ring_distance=task.ring_distance, cell=task.cell, letters=letters)
    for line, buckets in buckets_by_line:
        extended: List[str] = []
        for letter in letters:
            extended.extend(buckets[letter])
        result.candidates[line] = tuple(extended)
        result.accepted[line] = frozenset(buckets)

    if not letters:
        LOGGER.debug(
            "Ring %d cell %s: no letter satisfies all %d lines",
            task.ring_distance,
            task.cell,
            len(task.lines),
        )
    return result
