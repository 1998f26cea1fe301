"""CLI entrypoint for the hexagonal regex crossword solver."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Dict

from hexcross.core.exceptions import HexCrosswordError
from hexcross.data.puzzles import load_puzzle, puzzle_names
from hexcross.engine.crossword import Crossword
from hexcross.engine.driver import SolveResult, SolverConfig, solve
from hexcross.utils.logger import configure_logging
from hexcross.utils.pretty import pretty_print_result


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Solve hexagonal regex crosswords by ring-based propagation",
    )
    parser.add_argument(
        "--puzzle",
        type=str,
        choices=list(puzzle_names()),
        default="basic",
        help="Built-in puzzle to solve",
    )
    parser.add_argument(
        "--workers",
        type=int,
        default=1,
        help="Threads used to evaluate the cells of one ring",
    )
    parser.add_argument(
        "--partial-only",
        action="store_true",
        help="Keep strings that only partially match after the last ring",
    )
    parser.add_argument(
        "--stop-when-empty",
        action="store_true",
        help="Skip the remaining rings once a cell has no shared letter",
    )
    parser.add_argument(
        "--no-assemble",
        action="store_true",
        help="Do not run the CP-SAT grid assembly after propagation",
    )
    parser.add_argument(
        "--assemble-timeout",
        type=float,
        default=10.0,
        help="CP-SAT time limit in seconds",
    )
    parser.add_argument("--output", type=Path, help="Optional path to JSON output")
    parser.add_argument(
        "--pretty",
        action="store_true",
        help="Print the grid and candidates instead of JSON",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default="INFO",
        help="Logging level (DEBUG, INFO, WARNING, ERROR)",
    )
    return parser


def result_payload(crossword: Crossword, result: SolveResult) -> Dict[str, Any]:
    payload: Dict[str, Any] = {
        "radius": result.radius,
        "solved": result.is_solved,
        "has_solution": result.has_solution,
        "stopped_early": result.stopped_early,
        "lines": [
            {
                "start": [line.start.q, line.start.r],
                "direction": line.direction.name,
                "constraint": crossword.search_of(line).describe(),
                "cells": [[cell.q, cell.r] for cell in result.spans[line]],
                "candidates": list(result.words_of(line)),
                "rejected": list(result.acceptance.rejected_for(line)),
            }
            for line in crossword
        ],
        "rings": [
            {
                "ring": summary.ring_distance,
                "tasks": summary.tasks,
                "empty_cells": [[cell.q, cell.r] for cell in summary.empty_cells],
            }
            for summary in result.rings
        ],
        "assignment": None,
    }
    if result.assignment is not None:
        payload["assignment"] = [
            {"cell": [cell.q, cell.r], "letter": letter}
            for cell, letter in sorted(result.assignment.cells.items())
        ]
    return payload


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    level = getattr(logging, args.log_level.upper(), logging.INFO)
    configure_logging(level)

    if args.workers < 1:
        parser.error("--workers must be at least 1")

    config = SolverConfig(
        max_workers=args.workers,
        require_full_match=not args.partial_only,
        stop_when_empty=args.stop_when_empty,
        assemble=not args.no_assemble,
        assemble_timeout=args.assemble_timeout,
    )

    crossword = load_puzzle(args.puzzle)
    try:
        result = solve(crossword, config)
    except HexCrosswordError as exc:
        logging.getLogger("hexcross").error("Puzzle %r is misconfigured: %s", args.puzzle, exc)
        return 2

    if args.pretty:
        pretty_print_result(crossword, result, label=f"Puzzle: {args.puzzle}")
        return 0

    output_text = json.dumps(result_payload(crossword, result), indent=2)
    if args.output:
        args.output.write_text(output_text, encoding="utf-8")
    else:
        print(output_text)
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
