"""Line constraints: anchored patterns or arbitrary predicates.

``Search`` is a closed union of two variants. ``PatternSearch`` compiles its
pattern once with the ``regex`` package and answers prefix queries through
partial matching: ``fullmatch(candidate, partial=True)`` succeeds exactly when
the matcher is not dead after consuming ``candidate``. ``FunctionSearch``
wraps a predicate for constraints outside regular languages (back-references,
for instance) and uses it for both prefix and final queries.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Union

import regex

from ..core.exceptions import PatternError


Predicate = Callable[[str], bool]


@dataclass(frozen=True)
class PatternSearch:
    """Anchored regular expression constraint."""

    pattern: str
    _compiled: Any = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        try:
            compiled = regex.compile(self.pattern)
        except regex.error as exc:
            raise PatternError(f"Pattern {self.pattern!r} does not compile: {exc}") from exc
        object.__setattr__(self, "_compiled", compiled)

    def partially_matches(self, candidate: str) -> bool:
        return self._compiled.fullmatch(candidate, partial=True) is not None

    def fully_matches(self, candidate: str) -> bool:
        return self._compiled.fullmatch(candidate) is not None

    def describe(self) -> str:
        return self.pattern


@dataclass(frozen=True)
class FunctionSearch:
    """Predicate constraint; the predicate must not mutate shared state."""

    predicate: Predicate
    name: str = ""

    def partially_matches(self, candidate: str) -> bool:
        return bool(self.predicate(candidate))

    def fully_matches(self, candidate: str) -> bool:
        return bool(self.predicate(candidate))

    def describe(self) -> str:
        return self.name or getattr(self.predicate, "__name__", "<function>")


Search = Union[PatternSearch, FunctionSearch]


def expression(text: str) -> PatternSearch:
    """Build a pattern constraint anchored at both ends."""
    if not (text.startswith("^") and text.endswith("$")):
        text = f"^(?:{text})$"
    return PatternSearch(text)


def function(predicate: Predicate, name: str = "") -> FunctionSearch:
    return FunctionSearch(predicate, name or getattr(predicate, "__name__", ""))


def as_search(value: Union[Search, str, Predicate]) -> Search:
    """Coerce configuration values into a Search variant."""
    if isinstance(value, (PatternSearch, FunctionSearch)):
        return value
    if isinstance(value, str):
        return expression(value)
    if callable(value):
        return function(value)
    raise TypeError(f"Cannot build a line constraint from {value!r}")
