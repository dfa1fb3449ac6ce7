"""
Complexity scores: minimal keystrokes times the code's numeric value.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from chain_solver import ChainSolver
from keypad_parser import parse_codes
from keypad_types import Code, Key, chunk_str
from transitions import build_chain

PART_ONE_ROBOTS = 2
PART_TWO_ROBOTS = 25


@dataclass(frozen=True)
class CodeComplexity:
    """Breakdown of one code's contribution."""

    code: str
    sequence_length: int
    numeric_value: int
    score: int


def numeric_value(code: Code) -> int:
    """Integer formed by the code's digits; 0 for a bare 'A'."""
    digits = "".join(key.value for key in code if key is not Key.ACTIVATE)
    return int(digits) if digits else 0


def complexity_score(code: Code, solver: ChainSolver) -> int:
    return numeric_value(code) * solver.solve(code)


def complexity_report(codes: Iterable[Code], directional_count: int) -> list[CodeComplexity]:
    """Solve every code against one shared chain and memo."""
    solver = ChainSolver(build_chain(directional_count))
    report: list[CodeComplexity] = []
    for code in codes:
        length = solver.solve(code)
        value = numeric_value(code)
        report.append(CodeComplexity(chunk_str(code), length, value, length * value))
    return report


def total_complexity(codes: Iterable[Code], directional_count: int) -> int:
    return sum(entry.score for entry in complexity_report(codes, directional_count))


def part1(text: str) -> int:
    return total_complexity(parse_codes(text), PART_ONE_ROBOTS)


def part2(text: str) -> int:
    return total_complexity(parse_codes(text), PART_TWO_ROBOTS)
