"""
Shared type definitions for the keypad chain solver.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Key(Enum):
    """A button on either keypad, valued by its puzzle symbol."""

    ZERO = "0"
    ONE = "1"
    TWO = "2"
    THREE = "3"
    FOUR = "4"
    FIVE = "5"
    SIX = "6"
    SEVEN = "7"
    EIGHT = "8"
    NINE = "9"
    ACTIVATE = "A"
    UP = "^"  # decreasing row
    DOWN = "v"  # increasing row
    LEFT = "<"  # decreasing col
    RIGHT = ">"  # increasing col

    @property
    def is_direction(self) -> bool:
        return self in DIRECTION_DELTAS


# (dcol, drow) for each movement key
DIRECTION_DELTAS: dict[Key, tuple[int, int]] = {
    Key.UP: (0, -1),
    Key.DOWN: (0, 1),
    Key.LEFT: (-1, 0),
    Key.RIGHT: (1, 0),
}


# =============================================================================
# Keypad Definition Types
# =============================================================================


@dataclass(frozen=True)
class GridPosition:
    """A cell on a keypad grid."""

    col: int
    row: int

    def offset(self, dcol: int, drow: int) -> GridPosition:
        return GridPosition(self.col + dcol, self.row + drow)


@dataclass(frozen=True)
class KeypadLayout:
    """
    An immutable keypad: where each button sits, plus the one empty gap cell.

    The gap is where no button exists; an arm hovering over it panics.
    """

    name: str
    buttons: tuple[tuple[Key, GridPosition], ...]
    gap: GridPosition

    def __post_init__(self) -> None:
        keys = [key for key, _ in self.buttons]
        positions = [pos for _, pos in self.buttons]

        duplicate_keys = sorted({k.value for k in keys if keys.count(k) > 1})
        if duplicate_keys:
            raise ValueError(
                f"Keypad '{self.name}' declares keys more than once: {', '.join(duplicate_keys)}"
            )
        if len(set(positions)) != len(positions):
            raise ValueError(f"Keypad '{self.name}' places two keys on the same cell")
        if self.gap in positions:
            clash = next(key for key, pos in self.buttons if pos == self.gap)
            raise ValueError(
                f"Keypad '{self.name}' gap at ({self.gap.col}, {self.gap.row}) "
                f"overlaps key '{clash.value}'"
            )

    @property
    def keys(self) -> tuple[Key, ...]:
        return tuple(key for key, _ in self.buttons)

    @property
    def cols(self) -> int:
        return max(pos.col for pos in self._cells()) + 1

    @property
    def rows(self) -> int:
        return max(pos.row for pos in self._cells()) + 1

    def _cells(self) -> list[GridPosition]:
        return [pos for _, pos in self.buttons] + [self.gap]

    def position(self, key: Key) -> GridPosition:
        """Locate a key; KeyError if this keypad has no such button."""
        for candidate, pos in self.buttons:
            if candidate is key:
                return pos
        raise KeyError(f"Key '{key.value}' is not on keypad '{self.name}'")

    def key_at(self, pos: GridPosition) -> Key | None:
        """The button at a cell, or None for the gap and off-grid cells."""
        for key, candidate in self.buttons:
            if candidate == pos:
                return key
        return None


# A run of key presses ending in Activate
Chunk = tuple[Key, ...]

# A code to type on the numeric keypad, always ending in Activate
Code = tuple[Key, ...]


def chunk_str(keys: tuple[Key, ...] | list[Key]) -> str:
    """Render keys as their puzzle symbols, e.g. '<^A'."""
    return "".join(key.value for key in keys)


def keys_from_str(text: str) -> tuple[Key, ...]:
    """Inverse of chunk_str; ValueError for an unknown symbol."""
    return tuple(Key(ch) for ch in text)
