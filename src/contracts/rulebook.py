"""Central registry of board invariants."""

from __future__ import annotations


from dataclasses import dataclass
from typing import Callable, Iterable, List

from engine.board import board_id_for_seed
from engine.counter import count_solutions
from engine.difficulty import Difficulty, removals_for
from engine.grid import SIZE, count_empty, is_complete_solution, is_consistent

from .errors import ValidationIssue, make_error, make_warning
from .profiles import ProfileConfig


@dataclass(frozen=True)
class InvariantRule:
    name: str
    check: Callable[[dict], Iterable[ValidationIssue]]


def _board_id(record: dict) -> Iterable[ValidationIssue]:
    expected = board_id_for_seed(record["seed"])
    if record["id"] != expected:
        # Boards built outside generate() may carry their own ids.
        return [make_warning("board.id_mismatch", f"id {record['id']} is not derived from the seed (expected {expected})", "$.id")]
    return []


def _solution_valid(record: dict) -> Iterable[ValidationIssue]:
    if is_complete_solution(record["solution"]):
        return []
    return [make_error("solution.invalid", "solution rows, columns and blocks must be permutations of 1..9", "$.solution")]


def _puzzle_consistent(record: dict) -> Iterable[ValidationIssue]:
    puzzle = record["puzzle"]
    solution = record["solution"]
    issues: List[ValidationIssue] = []
    for r in range(SIZE):
        for c in range(SIZE):
            if puzzle[r][c] and puzzle[r][c] != solution[r][c]:
                issues.append(
                    make_error(
                        "puzzle.inconsistent",
                        f"given {puzzle[r][c]} differs from solution {solution[r][c]}",
                        f"$.puzzle[{r}][{c}]",
                    )
                )
    return issues


def _puzzle_unique(record: dict) -> Iterable[ValidationIssue]:
    if not is_consistent(record["puzzle"], record["solution"]):
        return []
    found = count_solutions(record["puzzle"], cap=2)
    if found == 1:
        return []
    if found == 0:
        return [make_error("puzzle.unsolvable", "puzzle has no completion", "$.puzzle")]
    return [make_error("puzzle.ambiguous", "puzzle has more than one completion", "$.puzzle")]


def _removal_target(record: dict) -> Iterable[ValidationIssue]:
    target = removals_for(Difficulty.parse(record["difficulty"]))
    empty = count_empty(record["puzzle"])
    if empty < target:
        return [make_warning("puzzle.short_of_target", f"{empty} empty cells, difficulty table asks for {target}", "$.puzzle")]
    return []


INVARIANTS: List[InvariantRule] = [
    InvariantRule("board_id", _board_id),
    InvariantRule("solution_valid", _solution_valid),
    InvariantRule("puzzle_consistent", _puzzle_consistent),
    InvariantRule("puzzle_unique", _puzzle_unique),
    InvariantRule("removal_target", _removal_target),
]


def run_invariants(record: dict, profile: ProfileConfig) -> List[ValidationIssue]:
    """Run every invariant enabled by ``profile`` on a schema-valid record."""

    issues: List[ValidationIssue] = []
    for rule in INVARIANTS:
        if profile.is_rule_enabled(rule.name):
            issues.extend(rule.check(record))
    return issues


__all__ = ["INVARIANTS", "InvariantRule", "run_invariants"]
