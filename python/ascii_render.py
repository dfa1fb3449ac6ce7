"""
ASCII rendering for keypads and chains, with colors.

Each keypad is drawn as a box grid; the gap is left blank and the key under
an arm can be highlighted.
"""

from __future__ import annotations

from typing import Callable

import simple_chalk as chalk  # type: ignore[import-untyped]

from keypad_types import GridPosition, Key, KeypadLayout
from transitions import Chain

__all__ = ["render_keypad", "render_chain", "keypad_width"]


def keypad_width(layout: KeypadLayout) -> int:
    """Printed width of a keypad, excluding color codes."""
    return layout.cols * 4 + 1


def _keypad_lines(
    layout: KeypadLayout,
    highlight: Key | None,
    colorize: Callable[[str], str],
) -> list[str]:
    border = colorize("+" + "---+" * layout.cols)
    sep = colorize("|")

    lines: list[str] = []
    for row in range(layout.rows):
        lines.append(border)
        cells: list[str] = []
        for col in range(layout.cols):
            key = layout.key_at(GridPosition(col, row))
            if key is None:
                cells.append("   ")
            elif key is highlight:
                cells.append(chalk.bgWhite.black(f" {key.value} "))
            else:
                cells.append(f" {key.value} ")
        lines.append(sep + sep.join(cells) + sep)
    lines.append(border)
    return lines


def render_keypad(
    layout: KeypadLayout,
    highlight: Key | None = None,
    colorize: Callable[[str], str] = chalk.cyan,
) -> str:
    """
    Render a single keypad.

    Args:
        layout: The keypad to draw
        highlight: Optional key to draw inverted (where the arm is)
        colorize: Color applied to the borders

    Returns:
        Rendered ASCII string with ANSI color codes
    """
    return "\n".join(_keypad_lines(layout, highlight, colorize))


def render_chain(chain: Chain, cursors: list[Key] | None = None, gap: int = 2) -> str:
    """
    Render every keypad in a chain side by side, human's end on the left.

    Args:
        chain: The chain to draw
        cursors: Optional per-depth arm positions to highlight
        gap: Spaces between adjacent keypads
    """
    colors: list[Callable[[str], str]] = [
        chalk.red,
        chalk.green,
        chalk.yellow,
        chalk.blue,
        chalk.magenta,
        chalk.cyan,
    ]

    columns: list[tuple[list[str], int]] = []
    for depth in reversed(range(len(chain))):
        layout = chain[depth]
        highlight = cursors[depth] if cursors is not None else None
        colorize = colors[depth % len(colors)]
        title = f"{depth}: {layout.name}"
        width = max(keypad_width(layout), len(title))
        pad = " " * (width - keypad_width(layout))
        body = [line + pad for line in _keypad_lines(layout, highlight, colorize)]
        columns.append(([colorize(title.ljust(width))] + body, width))

    height = max(len(lines) for lines, _ in columns)
    spacer = " " * gap
    out: list[str] = []
    for i in range(height):
        parts = [lines[i] if i < len(lines) else " " * width for lines, width in columns]
        out.append(spacer.join(parts).rstrip())
    return "\n".join(out)
