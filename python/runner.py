"""
Command-line runner: read codes from a file and print both parts.

Usage:
    python runner.py <input.txt> [--breakdown] [--verbose] [--robots N]

--robots overrides the number of directional keypads used for part 2.
"""

from __future__ import annotations

import logging
import sys
import time
from dataclasses import dataclass
from pathlib import Path

from simple_chalk import chalk  # type: ignore[import-untyped]

from complexity import PART_ONE_ROBOTS, PART_TWO_ROBOTS, complexity_report
from keypad_parser import parse_codes
from keypad_types import Code

USAGE = "Usage: python runner.py <input.txt> [--breakdown] [--verbose] [--robots N]"


@dataclass(frozen=True)
class RunConfig:
    """Options for one run."""

    input_path: Path
    robots_part1: int = PART_ONE_ROBOTS
    robots_part2: int = PART_TWO_ROBOTS
    breakdown: bool = False
    verbose: bool = False


def parse_args(argv: list[str]) -> RunConfig:
    """Parse command-line arguments (excluding the program name)."""
    input_path: Path | None = None
    robots_part2 = PART_TWO_ROBOTS
    breakdown = False
    verbose = False

    args = iter(argv)
    for arg in args:
        if arg in ("-b", "--breakdown"):
            breakdown = True
        elif arg in ("-v", "--verbose"):
            verbose = True
        elif arg == "--robots":
            value = next(args, None)
            if value is None or not value.isdigit():
                raise ValueError(f"--robots expects a non-negative integer, got {value!r}\n{USAGE}")
            robots_part2 = int(value)
        elif arg.startswith("-"):
            raise ValueError(f"Unknown option: {arg}\n{USAGE}")
        elif input_path is None:
            input_path = Path(arg)
        else:
            raise ValueError(f"Unexpected argument: {arg}\n{USAGE}")

    if input_path is None:
        raise ValueError(f"Missing input file\n{USAGE}")

    return RunConfig(input_path, robots_part2=robots_part2, breakdown=breakdown, verbose=verbose)


def run_part(label: str, codes: list[Code], robots: int, breakdown: bool) -> int:
    """Solve one part, printing its result line and optional per-code breakdown."""
    start = time.perf_counter()
    report = complexity_report(codes, robots)
    total = sum(entry.score for entry in report)
    elapsed = time.perf_counter() - start

    if breakdown:
        for entry in report:
            print(
                f"  {entry.code}: {entry.sequence_length} * {entry.numeric_value}, "
                f"Complexity -> {entry.score}"
            )
    print(f"{chalk.bold(label)}: {chalk.green(str(total))} ({elapsed * 1000:.2f} ms, {robots} robots)")
    return total


def main(argv: list[str]) -> int:
    try:
        config = parse_args(argv)
    except ValueError as e:
        print(chalk.red(str(e)), file=sys.stderr)
        return 1

    if config.verbose:
        logging.basicConfig(level=logging.INFO, format='%(levelname)s: %(message)s')

    try:
        codes = parse_codes(config.input_path.read_text())
    except (OSError, ValueError) as e:
        print(chalk.red(f"Failed to read {config.input_path}: {e}"), file=sys.stderr)
        return 1

    print(chalk.cyanBright.bold("=== Keypad Chain Complexity ==="))
    print()
    run_part("Part 1", codes, config.robots_part1, config.breakdown)
    run_part("Part 2", codes, config.robots_part2, config.breakdown)
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
