import unittest

from hexcross.core.constants import HexDirection
from hexcross.core.hexgrid import ORIGIN, Hex
from hexcross.core.models import Line, LineTask, Task
from hexcross.engine.propagator import extend_line, propagate
from hexcross.engine.search import expression, function


FIRST = Line(Hex(1, 0), HexDirection.WEST)
SECOND = Line(Hex(0, 1), HexDirection.NORTH_WEST)


def make_task(*line_tasks: LineTask) -> Task:
    return Task(ring_distance=0, cell=ORIGIN, lines=tuple(line_tasks))


class ExtendLineTests(unittest.TestCase):
    def test_buckets_group_extensions_by_letter(self) -> None:
        buckets = extend_line(LineTask(FIRST, expression("[AB][XY]"), ("A", "B", "C")))
        self.assertEqual(buckets, {"X": ["AX", "BX"], "Y": ["AY", "BY"]})

    def test_custom_alphabet_limits_scan(self) -> None:
        buckets = extend_line(LineTask(FIRST, expression(".*"), ("",)), alphabet="QZ")
        self.assertEqual(buckets, {"Q": ["Q"], "Z": ["Z"]})


class PropagateTests(unittest.TestCase):
    def test_letters_are_intersected_across_lines(self) -> None:
        result = propagate(
            make_task(
                LineTask(FIRST, expression("[AB]C"), ("",)),
                LineTask(SECOND, expression("[BD]"), ("",)),
            )
        )
        self.assertEqual(result.letters, ("B",))
        self.assertEqual(result.candidates[FIRST], ("B",))
        self.assertEqual(result.candidates[SECOND], ("B",))
        self.assertEqual(result.accepted[FIRST], frozenset("AB"))
        self.assertEqual(result.accepted[SECOND], frozenset("BD"))

    def test_new_prefixes_follow_alphabet_then_prefix_order(self) -> None:
        result = propagate(
            make_task(
                LineTask(FIRST, expression("[AB][XYZ]"), ("A", "B")),
                LineTask(SECOND, expression("[YX]"), ("",)),
            )
        )
        self.assertEqual(result.letters, ("X", "Y"))
        self.assertEqual(result.candidates[FIRST], ("AX", "BX", "AY", "BY"))

    def test_letters_outside_intersection_are_dropped(self) -> None:
        result = propagate(
            make_task(
                LineTask(FIRST, expression("A[BC]"), ("A",)),
                LineTask(SECOND, expression("C"), ("",)),
            )
        )
        self.assertEqual(result.candidates[FIRST], ("AC",))

    def test_empty_intersection_empties_every_line(self) -> None:
        result = propagate(
            make_task(
                LineTask(FIRST, expression(".A"), ("E",)),
                LineTask(SECOND, expression(".B"), ("B", "D")),
            )
        )
        self.assertTrue(result.is_empty)
        self.assertEqual(result.candidates, {FIRST: (), SECOND: ()})

    def test_collapsed_line_stays_empty(self) -> None:
        result = propagate(
            make_task(
                LineTask(FIRST, expression(".*"), ()),
                LineTask(SECOND, expression(".*"), ("",)),
            )
        )
        self.assertEqual(result.letters, ())
        self.assertEqual(result.candidates[FIRST], ())
        self.assertEqual(result.candidates[SECOND], ())

    def test_function_constraint_participates(self) -> None:
        same = function(lambda s: len(s) < 2 or s[0] == s[1], name="same")
        result = propagate(
            make_task(
                LineTask(FIRST, same, ("K",)),
                LineTask(SECOND, expression("[JK]"), ("",)),
            )
        )
        self.assertEqual(result.letters, ("K",))
        self.assertEqual(result.candidates[FIRST], ("KK",))

    def test_empty_task_yields_nothing(self) -> None:
        result = propagate(make_task())
        self.assertEqual(result.letters, ())
        self.assertEqual(result.candidates, {})


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
