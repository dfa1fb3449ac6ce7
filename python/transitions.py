"""
Keypad layouts, per-layout transition tables, and the keypad chain.

A transition table answers: "the arm is over key X and must press key Y;
which move sequences could the next keypad out type to make that happen?"
Only axis-aligned L-shaped paths are considered (all horizontal moves then
all vertical, or the reverse), minus any that would sweep the arm over the
gap.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from functools import cache
from typing import Iterator

from keypad_parser import parse_layout
from keypad_types import DIRECTION_DELTAS, Chunk, GridPosition, Key, KeypadLayout, chunk_str

logger = logging.getLogger(__name__)


# +---+---+---+
# | 7 | 8 | 9 |
# +---+---+---+
# | 4 | 5 | 6 |
# +---+---+---+
# | 1 | 2 | 3 |
# +---+---+---+
#     | 0 | A |
#     +---+---+
NUMERIC_LAYOUT = parse_layout("numeric", "789|456|123|_0A")

#     +---+---+
#     | ^ | A |
# +---+---+---+
# | < | v | > |
# +---+---+---+
DIRECTIONAL_LAYOUT = parse_layout("directional", "_^A|<v>")

LAYOUTS: dict[str, KeypadLayout] = {
    NUMERIC_LAYOUT.name: NUMERIC_LAYOUT,
    DIRECTIONAL_LAYOUT.name: DIRECTIONAL_LAYOUT,
}


# =============================================================================
# Transition Tables
# =============================================================================


@dataclass(frozen=True, eq=False)
class TransitionTable:
    """Candidate move sequences between every ordered pair of keys on a layout."""

    layout: KeypadLayout
    moves: dict[tuple[Key, Key], tuple[Chunk, ...]]

    def candidates(self, from_key: Key, to_key: Key) -> tuple[Chunk, ...]:
        """
        Return the 1 or 2 minimal move sequences from one key to another.

        Raises:
            KeyError: If either key is not on this layout
        """
        try:
            return self.moves[(from_key, to_key)]
        except KeyError:
            raise KeyError(
                f"No transition {from_key.value!r} -> {to_key.value!r} "
                f"on keypad '{self.layout.name}'"
            ) from None


def trace_path(start: GridPosition, chunk: Chunk) -> Iterator[GridPosition]:
    """Yield every cell an arm visits while following chunk's movement keys."""
    pos = start
    yield pos
    for key in chunk:
        if key is Key.ACTIVATE:
            continue
        pos = pos.offset(*DIRECTION_DELTAS[key])
        yield pos


def _moves_for(from_pos: GridPosition, to_pos: GridPosition, gap: GridPosition) -> list[Chunk]:
    dx = to_pos.col - from_pos.col
    dy = to_pos.row - from_pos.row

    horizontal = [Key.LEFT if dx < 0 else Key.RIGHT] * abs(dx)
    vertical = [Key.UP if dy < 0 else Key.DOWN] * abs(dy)

    sequences: list[Chunk] = []

    # Horizontal-first turns at (from.col + dx, from.row)
    if from_pos.offset(dx, 0) != gap:
        sequences.append(tuple(horizontal + vertical + [Key.ACTIVATE]))

    # Vertical-first turns at (from.col, from.row + dy); identical when on one axis
    if from_pos.offset(0, dy) != gap:
        candidate = tuple(vertical + horizontal + [Key.ACTIVATE])
        if candidate not in sequences:
            sequences.append(candidate)

    return sequences


def build_transitions(layout: KeypadLayout) -> TransitionTable:
    """
    Precompute candidate move sequences for every ordered key pair.

    Each candidate is the moves plus a trailing Activate, so its length is
    the Manhattan distance + 1.

    Raises:
        ValueError: If a pair has no valid candidate or a candidate's path
            crosses the gap (inconsistent layout)
    """
    moves: dict[tuple[Key, Key], tuple[Chunk, ...]] = {}

    for from_key, from_pos in layout.buttons:
        for to_key, to_pos in layout.buttons:
            sequences = _moves_for(from_pos, to_pos, layout.gap)

            if not sequences:
                raise ValueError(
                    f"Keypad '{layout.name}' has no gap-free path "
                    f"from '{from_key.value}' to '{to_key.value}'"
                )
            for sequence in sequences:
                if layout.gap in trace_path(from_pos, sequence):
                    raise ValueError(
                        f"Keypad '{layout.name}' path {chunk_str(sequence)!r} "
                        f"from '{from_key.value}' to '{to_key.value}' crosses the gap"
                    )

            moves[(from_key, to_key)] = tuple(sequences)

    logger.debug(
        "build_transitions: keypad=%s, pairs=%d, two-candidate pairs=%d",
        layout.name,
        len(moves),
        sum(1 for seqs in moves.values() if len(seqs) == 2),
    )
    return TransitionTable(layout, moves)


@cache
def transition_table(layout: KeypadLayout) -> TransitionTable:
    """Shared, lazily built transition table for a layout."""
    return build_transitions(layout)


# =============================================================================
# Chain
# =============================================================================


@dataclass(frozen=True)
class Chain:
    """
    The keypads between the human and the door.

    layouts[0] is the numeric keypad; layouts[1:] are directional keypads,
    the last of which is driven directly by the human's own presses.
    """

    layouts: tuple[KeypadLayout, ...]

    def __len__(self) -> int:
        return len(self.layouts)

    def __getitem__(self, depth: int) -> KeypadLayout:
        return self.layouts[depth]

    @property
    def directional_count(self) -> int:
        return len(self.layouts) - 1


def build_chain(directional_count: int) -> Chain:
    """Numeric keypad followed by directional_count directional keypads."""
    if directional_count < 0:
        raise ValueError(f"directional_count must be >= 0, got {directional_count}")
    return Chain((NUMERIC_LAYOUT,) + (DIRECTIONAL_LAYOUT,) * directional_count)
