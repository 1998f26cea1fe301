import unittest

from hexcross.core.hexgrid import ORIGIN, Hex
from hexcross.data.puzzles import (basic_crossword, build_wedge, contradiction_crossword,
                                   tiny_crossword, wedge_columns, wedge_rows)
from hexcross.engine.driver import RingDriver, SolverConfig, solve


class TinyPuzzleTests(unittest.TestCase):
    def test_rings_one_then_zero_solve_both_axes(self) -> None:
        result = solve(tiny_crossword())
        rows, columns = wedge_rows(1), wedge_columns(1)
        self.assertEqual(result.words_of(rows[0]), ("EA",))
        self.assertEqual(result.words_of(rows[1]), ("B",))
        self.assertEqual(result.words_of(columns[0]), ("BA",))
        self.assertEqual(result.words_of(columns[1]), ("E",))
        self.assertEqual([summary.ring_distance for summary in result.rings], [1, 0])
        self.assertTrue(result.is_solved)

    def test_assignment_places_letters_on_cells(self) -> None:
        result = solve(tiny_crossword())
        assert result.assignment is not None
        self.assertEqual(
            result.assignment.cells,
            {Hex(1, 0): "E", Hex(0, 1): "B", ORIGIN: "A"},
        )

    def test_candidates_violating_an_axis_are_absent(self) -> None:
        crossword = build_wedge(
            1,
            rows=[".A", "[BC]"],
            columns=["[BC]A", "[D-F]"],
        )
        result = solve(crossword)
        for word in result.words_of(wedge_rows(1)[0]):
            self.assertIn(word[0], "DEF")
            self.assertEqual(word[1], "A")
        self.assertEqual(result.words_of(wedge_columns(1)[0]), ("BA", "CA"))


class BasicPuzzleTests(unittest.TestCase):
    def setUp(self) -> None:
        self.rows = wedge_rows(2)
        self.columns = wedge_columns(2)

    def test_full_match_rejects_partial_survivors(self) -> None:
        result = solve(basic_crossword())
        self.assertEqual(result.words_of(self.columns[0]), ("OAX",))
        self.assertEqual(result.acceptance.rejected_for(self.columns[0]), ("OAZ",))
        self.assertEqual(result.words_of(self.rows[0]), ("HEX", "HEZ"))
        self.assertEqual(result.words_of(self.rows[1]), ("AA",))
        self.assertFalse(result.is_solved)
        self.assertTrue(result.has_solution)

    def test_partial_only_keeps_every_survivor(self) -> None:
        result = solve(basic_crossword(), SolverConfig(require_full_match=False, assemble=False))
        self.assertEqual(result.words_of(self.columns[0]), ("OAX", "OAZ"))
        self.assertEqual(result.acceptance.rejected, {})
        self.assertIsNone(result.assignment)

    def test_assembly_resolves_remaining_ambiguity(self) -> None:
        result = solve(basic_crossword())
        assert result.assignment is not None
        self.assertEqual(result.assignment.words[self.rows[0]], "HEX")
        self.assertEqual(result.assignment.letter_at(ORIGIN), "X")

    def test_letters_at_center(self) -> None:
        result = solve(basic_crossword())
        self.assertEqual(result.letters_at(ORIGIN), ("X", "Z"))

    def test_solving_twice_is_deterministic(self) -> None:
        crossword = basic_crossword()
        first = solve(crossword, SolverConfig(assemble=False))
        second = solve(crossword, SolverConfig(assemble=False))
        self.assertEqual(first.solutions, second.solutions)

    def test_parallel_rings_match_sequential(self) -> None:
        sequential = solve(basic_crossword(), SolverConfig(assemble=False))
        parallel = solve(basic_crossword(), SolverConfig(max_workers=4, assemble=False))
        self.assertEqual(sequential.solutions, parallel.solutions)
        self.assertEqual(
            [summary.letters for summary in sequential.rings],
            [summary.letters for summary in parallel.rings],
        )

    def test_prefixes_grow_one_letter_per_ring(self) -> None:
        crossword = basic_crossword()
        driver = RingDriver(crossword)
        crossword.reset()
        for ring_distance in range(crossword.radius, -1, -1):
            driver.process_ring(ring_distance)
            for line in crossword:
                span = crossword.span_of(line)
                expected = min(len(span), crossword.radius - ring_distance + 1)
                for word in crossword.candidates_of(line):
                    self.assertEqual(len(word), expected)

    def test_shared_cells_agree_on_letters(self) -> None:
        crossword = basic_crossword()
        result = solve(crossword, SolverConfig(require_full_match=False, assemble=False))
        for summary in result.rings:
            for cell, letters in summary.letters.items():
                for line in crossword:
                    span = result.spans[line]
                    if cell not in span:
                        continue
                    position = span.index(cell)
                    for word in result.words_of(line):
                        self.assertIn(word[position], letters)


class ContradictionTests(unittest.TestCase):
    def test_shared_cell_conflict_empties_its_lines(self) -> None:
        result = solve(contradiction_crossword())
        rows, columns = wedge_rows(1), wedge_columns(1)
        self.assertEqual(result.words_of(rows[0]), ())
        self.assertEqual(result.words_of(columns[0]), ())
        self.assertEqual(result.words_of(rows[1]), ("B", "D"))
        self.assertEqual(result.words_of(columns[1]), ("E",))
        self.assertEqual(result.rings[-1].empty_cells, [ORIGIN])
        self.assertFalse(result.has_solution)
        self.assertIsNone(result.assignment)

    def test_stop_when_empty_clears_every_line(self) -> None:
        crossword = build_wedge(
            2,
            rows=["A..", "..", "."],
            columns=["...", "..", "B"],
        )
        result = solve(crossword, SolverConfig(stop_when_empty=True))
        self.assertTrue(result.stopped_early)
        self.assertEqual([summary.ring_distance for summary in result.rings], [2])
        self.assertTrue(all(words == () for words in result.solutions.values()))


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
