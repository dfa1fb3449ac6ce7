"""
Parsing utilities for keypad layouts and puzzle codes.

Provides two parsers:
1. Layout format: single-character cells, rows separated by |
2. Code format: one code per line, digits followed by a trailing A
"""

from __future__ import annotations

from keypad_types import Code, GridPosition, Key, KeypadLayout

__all__ = ["parse_layout", "parse_code", "parse_codes"]

GAP_MARKER = "_"
CODE_SYMBOLS = frozenset("0123456789A")


def parse_layout(name: str, definition: str) -> KeypadLayout:
    """
    Parse a keypad layout from a concise row-string drawing.

    Format:
    - Rows separated by |
    - One character per cell, no separators
    - '_' marks the gap (exactly one per layout)
    - Any other character must be a key symbol (0-9, A, ^, v, <, >)

    Example:
        parse_layout("numeric", "789|456|123|_0A")

        Creates the numeric keypad with 7 at (0, 0), A at (2, 3)
        and the gap at (0, 3).

    Args:
        name: Name used in error messages and rendering
        definition: Row string drawing

    Returns:
        The parsed KeypadLayout

    Raises:
        ValueError: On an unknown symbol, ragged rows, or a missing/extra gap
    """
    row_strings = definition.split("|")
    buttons: list[tuple[Key, GridPosition]] = []
    gaps: list[GridPosition] = []

    for row_idx, row_str in enumerate(row_strings):
        for col_idx, ch in enumerate(row_str):
            pos = GridPosition(col_idx, row_idx)
            if ch == GAP_MARKER:
                gaps.append(pos)
                continue
            try:
                key = Key(ch)
            except ValueError:
                error_msg = (
                    f"Invalid key symbol: '{ch}'\n"
                    f"  Keypad: '{name}'\n"
                    f"  Row {row_idx}: \"{row_str}\"\n"
                    f"  Position: column {col_idx}\n"
                    f"  Valid symbols: 0-9, A, ^, v, <, > and '{GAP_MARKER}' for the gap"
                )
                raise ValueError(error_msg) from None
            buttons.append((key, pos))

    # Validate all rows have same length
    cols = len(row_strings[0])
    mismatched = [(i, len(row)) for i, row in enumerate(row_strings) if len(row) != cols]
    if mismatched:
        error_msg = (
            f"Inconsistent row lengths in keypad '{name}'\n"
            f"  Expected: {cols} columns (from row 0)\n"
            f"  Mismatched rows:\n"
        )
        for row_idx, actual_cols in mismatched:
            error_msg += f"    Row {row_idx}: {actual_cols} columns - \"{row_strings[row_idx]}\"\n"
        error_msg += "  All rows must have the same number of cells"
        raise ValueError(error_msg)

    if len(gaps) != 1:
        raise ValueError(
            f"Keypad '{name}' must have exactly one gap ('{GAP_MARKER}'), found {len(gaps)}"
        )

    return KeypadLayout(name, tuple(buttons), gaps[0])


def parse_code(line: str, line_number: int = 1) -> Code:
    """
    Parse one code such as '029A'.

    Raises:
        ValueError: If the line holds a symbol outside 0-9/A, or does not
            end in A (an A anywhere but last counts as malformed)
    """
    for col_idx, ch in enumerate(line):
        if ch not in CODE_SYMBOLS or (ch == "A" and col_idx != len(line) - 1):
            error_msg = (
                f"Invalid code on line {line_number}: \"{line}\"\n"
                f"  Offending character: '{ch}' at column {col_idx}\n"
                f"  Expected format: digits 0-9 followed by a single trailing 'A'"
            )
            raise ValueError(error_msg)

    if not line.endswith("A"):
        error_msg = (
            f"Invalid code on line {line_number}: \"{line}\"\n"
            f"  Missing trailing 'A'\n"
            f"  Expected format: digits 0-9 followed by a single trailing 'A'"
        )
        raise ValueError(error_msg)

    return tuple(Key(ch) for ch in line)


def parse_codes(text: str) -> list[Code]:
    """
    Parse puzzle input: one code per line.

    Blank lines are skipped and surrounding whitespace is stripped; line
    numbers in errors refer to the raw input.
    """
    codes: list[Code] = []
    for line_idx, raw_line in enumerate(text.splitlines()):
        line = raw_line.strip()
        if not line:
            continue
        codes.append(parse_code(line, line_idx + 1))
    return codes
